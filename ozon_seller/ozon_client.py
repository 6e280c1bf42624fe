from __future__ import annotations

import os
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Type, TypeVar, Union

import httpx

from .errors import (
    OzonConfigurationError,
    OzonMissingArgumentError,
    OzonTransportError,
    OzonUnexpectedResponseError,
)
from .items import BatchError, PriceUpdateItem, StockUpdateItem


logger = logging.getLogger("ozon_seller.http")

PRODUCTION_BASE_URL = "http://api-seller.ozon.ru/"
SANDBOX_BASE_URL = "http://cb-api.ozonru.me/"

PRICES_IMPORT_PATH = "v1/product/import/prices"
STOCKS_IMPORT_PATH = "v1/product/import/stocks"
PRODUCT_LIST_PATH = "v1/product/list"
PRICES_INFO_PATH = "v1/product/info/prices"

_TRUTHY = {"1", "true", "yes", "on"}

ItemT = TypeVar("ItemT", PriceUpdateItem, StockUpdateItem)


def _redact_headers(headers: Mapping[str, Any]) -> Dict[str, Any]:
    redacted = {}
    for k, v in headers.items():
        lk = str(k).lower()
        if lk in {"client-id", "api-key", "authorization"}:
            redacted[k] = "[REDACTED]"
        else:
            redacted[k] = v
    return redacted


def _truncate(text: str, max_len: int = 1000) -> str:
    if text is None:
        return ""
    if len(text) <= max_len:
        return text
    return text[:max_len] + "... [truncated]"


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _collect_items(items: Sequence[Any], item_cls: Type[ItemT]) -> List[ItemT]:
    """Accept both f(a, b, c) and f([a, b, c]); coerce each entry to item_cls."""
    if len(items) == 1 and isinstance(items[0], (list, tuple)):
        sole = items[0]
        # A flat row such as ["SKU-1", 10] is one item, not a batch.
        if not sole or isinstance(sole[0], (item_cls, Mapping, list, tuple)):
            items = sole
    return [item_cls.coerce(item) for item in items]


def extract_update_errors(response: Any) -> List[BatchError]:
    """Pull the first error of every failed item out of a batch import response.

    Positions are 1-based and follow the order of ``response["result"]``.
    Items with an empty ``errors`` list are skipped.
    """
    if not isinstance(response, Mapping):
        raise OzonUnexpectedResponseError(
            f"Batch response is not an object: {_truncate(repr(response), 200)}"
        )
    result = response.get("result")
    if not isinstance(result, list):
        raise OzonUnexpectedResponseError(
            f"Batch response has no 'result' list: {_truncate(repr(response), 200)}"
        )

    errors: List[BatchError] = []
    for i, item in enumerate(result, start=1):
        if not isinstance(item, Mapping) or not isinstance(item.get("errors"), list):
            raise OzonUnexpectedResponseError(
                f"Batch result item {i} has no 'errors' list: {_truncate(repr(item), 200)}"
            )
        if not item["errors"]:
            continue
        first = item["errors"][0]
        if not isinstance(first, Mapping):
            raise OzonUnexpectedResponseError(
                f"Batch result item {i} has a malformed error: {_truncate(repr(first), 200)}"
            )
        errors.append(BatchError(i, item.get("offer_id"), first.get("code"), first.get("message")))
    return errors


def _update_result(response: Any) -> Dict[str, Any]:
    result: Dict[str, Any] = {"updated": "ok"}
    errors = extract_update_errors(response)
    if errors:
        result["errors"] = errors
    return result


def _result_items(response: Any, operation: str) -> List[Any]:
    result = response.get("result") if isinstance(response, Mapping) else None
    items = result.get("items") if isinstance(result, Mapping) else None
    if not isinstance(items, list):
        raise OzonUnexpectedResponseError(
            f"{operation} response has no 'result.items' list: {_truncate(repr(response), 200)}"
        )
    return items


@dataclass(frozen=True)
class SandboxProfile:
    """Credentials and endpoint for the Ozon test API (non-production data)."""

    account_id: str
    api_key: str
    base_url: str = SANDBOX_BASE_URL

    @classmethod
    def from_env(cls) -> "SandboxProfile":
        """Read the sandbox profile from environment variables.

        Required env vars:
        - OZON_TEST_CLIENT_ID
        - OZON_TEST_API_KEY
        Optional:
        - OZON_TEST_BASE_URL (defaults to the public test endpoint)
        """
        account_id = os.getenv("OZON_TEST_CLIENT_ID")
        api_key = os.getenv("OZON_TEST_API_KEY")
        base_url = os.getenv("OZON_TEST_BASE_URL", SANDBOX_BASE_URL)

        if not account_id or not api_key:
            raise OzonConfigurationError(
                "Test API requested but OZON_TEST_CLIENT_ID or OZON_TEST_API_KEY is not set."
            )

        return cls(account_id=account_id, api_key=api_key, base_url=base_url)


@dataclass(frozen=True)
class OzonClient:
    """Minimal async client for the Ozon Seller API.

    Every public method issues exactly one POST through a per-request
    httpx.AsyncClient. There are no retries and no timeouts.
    """

    account_id: Union[str, int]
    api_key: str
    base_url: str = PRODUCTION_BASE_URL
    transport: Optional[httpx.AsyncBaseTransport] = None

    def __post_init__(self) -> None:
        if not (self.account_id and self.api_key):
            raise OzonConfigurationError(
                "Ozon client needs both account_id and api_key, "
                "or use_test_api=True with a sandbox profile."
            )

    @classmethod
    def configure(
        cls,
        account_id: Union[str, int, None] = None,
        api_key: Optional[str] = None,
        *,
        use_test_api: bool = False,
        sandbox: Optional[SandboxProfile] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "OzonClient":
        """Resolve credentials and base URL.

        With ``use_test_api`` the sandbox profile wins and explicit
        credentials are ignored. Otherwise both credentials are required
        and the production endpoint is used.
        """
        if use_test_api:
            profile = sandbox or SandboxProfile.from_env()
            return cls(
                account_id=profile.account_id,
                api_key=profile.api_key,
                base_url=profile.base_url,
                transport=transport,
            )

        return cls(
            account_id=account_id,
            api_key=api_key,
            base_url=PRODUCTION_BASE_URL,
            transport=transport,
        )

    @classmethod
    def from_env(cls) -> "OzonClient":
        """Create a client using environment variables loaded via dotenv.

        Required env vars (production):
        - OZON_CLIENT_ID
        - OZON_API_KEY
        Optional:
        - OZON_USE_TEST_API (1/true/yes/on switches to the sandbox profile)
        """
        use_test_api = os.getenv("OZON_USE_TEST_API", "").strip().lower() in _TRUTHY
        account_id = os.getenv("OZON_CLIENT_ID")
        api_key = os.getenv("OZON_API_KEY")

        if not use_test_api and (not account_id or not api_key):
            raise OzonConfigurationError(
                "Missing OZON_CLIENT_ID or OZON_API_KEY in environment."
            )

        return cls.configure(account_id, api_key, use_test_api=use_test_api)

    @property
    def is_sandbox(self) -> bool:
        return self.base_url != PRODUCTION_BASE_URL

    def _headers(self) -> dict:
        return {
            "Client-Id": str(self.account_id),
            "Api-Key": str(self.api_key),
            "Content-Type": "application/json",
        }

    def _build_url(self, path: str, params: Optional[Mapping[str, Any]] = None) -> str:
        # Query values are joined as-is; the seller API expects them unescaped.
        url = self.base_url + path
        if params is not None:
            url += "?" + "&".join(f"{k}={_query_value(v)}" for k, v in params.items())
        return url

    async def _request(
        self,
        method: str = "GET",
        path: str = "",
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
    ) -> Any:
        """Send one request and return the parsed JSON body."""
        url = self._build_url(path, params)
        headers = self._headers()
        logger.debug(
            "HTTP %s %s headers=%s", method.upper(), url, _redact_headers(headers)
        )

        try:
            async with httpx.AsyncClient(
                headers=headers,
                timeout=None,
                transport=self.transport,
            ) as client:
                start = time.perf_counter()
                response = await client.request(method.upper(), url, json=body)
                elapsed_ms = (time.perf_counter() - start) * 1000.0
        except httpx.HTTPError as e:
            raise OzonTransportError(
                f"{method.upper()} {path} failed: {type(e).__name__}: {e}"
            ) from e

        logger.debug(
            "HTTP %s %s status=%s elapsed_ms=%.2f",
            method.upper(),
            path,
            response.status_code,
            elapsed_ms,
        )

        try:
            return response.json()
        except ValueError as e:
            raise OzonTransportError(
                f"{method.upper()} {path} returned non-JSON body: "
                f"{response.status_code} {_truncate(response.text or '', 200)}"
            ) from e

    # ----------------------------- API methods -----------------------------

    async def update_prices(self, *items: Any) -> Dict[str, Any]:
        """Import prices for one or more offers.

        Accepts ``update_prices(a, b)`` or ``update_prices([a, b])``; each
        entry may be a PriceUpdateItem, a mapping or a positional row.
        Returns ``{"updated": "ok"}`` plus ``"errors"`` when the provider
        rejected some items.
        """
        prices = _collect_items(items, PriceUpdateItem)
        response = await self._request(
            "POST",
            PRICES_IMPORT_PATH,
            body={"prices": [item.to_payload() for item in prices]},
        )
        return _update_result(response)

    async def update_stock(self, *items: Any) -> Dict[str, Any]:
        """Import stock counts for one or more offers. Same conventions as update_prices."""
        stocks = _collect_items(items, StockUpdateItem)
        response = await self._request(
            "POST",
            STOCKS_IMPORT_PATH,
            body={"stocks": [item.to_payload() for item in stocks]},
        )
        return _update_result(response)

    async def get_item_list(self, filter_options: Optional[Mapping[str, Any]]) -> List[Any]:
        """List the account's items matching a filter, e.g. ``{"visibility": "ALL"}``.

        The filter is sent verbatim; an empty mapping is allowed.
        """
        if not filter_options and not isinstance(filter_options, Mapping):
            raise OzonMissingArgumentError("get_item_list requires filter_options")

        response = await self._request("POST", PRODUCT_LIST_PATH, body=filter_options)
        return _result_items(response, "Product list")

    async def get_items_prices(self, *, page: int = 1, page_size: int = 100) -> List[List[Any]]:
        """Fetch one page of prices as rows [offer_id, price, old_price, premium_price]."""
        response = await self._request(
            "POST",
            PRICES_INFO_PATH,
            body={"page": page, "page_size": page_size},
        )

        rows: List[List[Any]] = []
        for item in _result_items(response, "Prices info"):
            price = item.get("price") if isinstance(item, Mapping) else None
            if not isinstance(price, Mapping):
                raise OzonUnexpectedResponseError(
                    f"Prices info item has no 'price' object: {_truncate(repr(item), 200)}"
                )
            rows.append([
                item.get("offer_id"),
                price.get("price"),
                price.get("old_price"),
                price.get("premium_price"),
            ])
        return rows
