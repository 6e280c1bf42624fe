"""Product listing tool."""

from __future__ import annotations

import logging
from typing import Any, Dict

from ..ozon_client import OzonClient
from ..utils.logging import truncate
from ..utils.projection import project_items

logger = logging.getLogger("ozon_seller.resources.products")

DEFAULT_FILTER = {"visibility": "ALL"}


async def ozon_products(
    filter: Dict[str, Any] | None = None,
    fields: list[str] | None = None,
) -> Dict[str, Any]:
    """List products in the seller account.

    Parameters:
    - filter: Ozon product list filter, sent verbatim (default {"visibility": "ALL"})
    - fields: Additional fields beyond defaults, or ["*"] for all

    Default returns: offer_id, product_id
    """
    logger.debug("Tool call: ozon_products(filter=%s, fields=%s)", filter, fields)
    client = OzonClient.from_env()
    items = await client.get_item_list(filter if filter is not None else dict(DEFAULT_FILTER))

    items = project_items(items, fields, base_fields={"offer_id", "product_id"})
    result = {
        "results": items,
        "total_returned": len(items),
    }
    logger.debug("Tool result: ozon_products -> %s", truncate(str(result)))
    return result
