"""Price import and price listing tools."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from ..ozon_client import OzonClient
from ..utils.logging import truncate

logger = logging.getLogger("ozon_seller.resources.prices")


def render_update_result(result: Dict[str, Any]) -> Dict[str, Any]:
    """Turn BatchError tuples into dicts so tool output is self-describing."""
    rendered = {"updated": result["updated"]}
    if "errors" in result:
        rendered["errors"] = [err._asdict() for err in result["errors"]]
    return rendered


async def ozon_update_prices(items: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Update prices for one or more offers.

    Parameters:
    - items: list of {"offer_id", "price", "old_price", "premium_price"}

    Returns {"updated": "ok"} and, when Ozon rejected some items,
    "errors": [{"index", "offer_id", "code", "message"}] with 1-based index.
    """
    logger.debug("Tool call: ozon_update_prices(items=%d)", len(items))
    client = OzonClient.from_env()
    result = render_update_result(await client.update_prices(items))
    logger.debug("Tool result: ozon_update_prices -> %s", truncate(str(result)))
    return result


async def ozon_prices(page: int = 1, page_size: int = 100) -> Dict[str, Any]:
    """List current prices, one page at a time.

    Parameters:
    - page: 1-based page number
    - page_size: items per page
    """
    logger.debug("Tool call: ozon_prices(page=%s, page_size=%s)", page, page_size)
    client = OzonClient.from_env()
    rows = await client.get_items_prices(page=page, page_size=page_size)

    results = [
        {
            "offer_id": offer_id,
            "price": price,
            "old_price": old_price,
            "premium_price": premium_price,
        }
        for offer_id, price, old_price, premium_price in rows
    ]
    result = {
        "results": results,
        "page": page,
        "total_returned": len(results),
    }
    logger.debug("Tool result: ozon_prices -> %s", truncate(str(result)))
    return result
