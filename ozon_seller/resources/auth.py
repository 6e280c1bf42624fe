"""Configuration status tool."""

from __future__ import annotations

import logging
from typing import Any, Dict

from ..ozon_client import OzonClient

logger = logging.getLogger("ozon_seller.resources.auth")


async def ozon_status() -> Dict[str, Any]:
    """Report which Ozon endpoint and account the server is configured for.

    Makes no network call and never returns the API key.
    """
    logger.debug("Tool call: ozon_status()")
    client = OzonClient.from_env()
    result = {
        "ok": True,
        "mode": "test" if client.is_sandbox else "production",
        "base_url": client.base_url,
        "account_id": str(client.account_id),
    }
    logger.debug("Tool result: ozon_status() -> %s", result)
    return result
