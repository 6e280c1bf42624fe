"""Stock import tool."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from ..ozon_client import OzonClient
from ..utils.logging import truncate
from .prices import render_update_result

logger = logging.getLogger("ozon_seller.resources.stock")


async def ozon_update_stock(items: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Update stock counts for one or more offers.

    Parameters:
    - items: list of {"offer_id", "stock"}

    Returns {"updated": "ok"} plus per-item "errors" when Ozon rejected some.
    """
    logger.debug("Tool call: ozon_update_stock(items=%d)", len(items))
    client = OzonClient.from_env()
    result = render_update_result(await client.update_stock(items))
    logger.debug("Tool result: ozon_update_stock -> %s", truncate(str(result)))
    return result
