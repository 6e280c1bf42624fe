"""Shared test fixtures for the Ozon Seller client tests."""

import httpx
import pytest
from unittest.mock import MagicMock, patch

from ozon_seller.ozon_client import OzonClient


@pytest.fixture
def recording_transport():
    """Factory for an httpx.MockTransport that records every request.

    Usage:
        transport, sent = recording_transport({"result": []})
        transport, sent = recording_transport(text="<html>", status_code=502)
    """
    def _make(json_data=None, *, text=None, status_code=200, exc=None):
        sent = []

        def handler(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            if exc is not None:
                raise exc
            if json_data is not None:
                return httpx.Response(status_code, json=json_data)
            return httpx.Response(status_code, text=text or "")

        return httpx.MockTransport(handler), sent
    return _make


@pytest.fixture
def make_client(recording_transport):
    """Build a production OzonClient wired to a recording transport.

    Returns (client, sent_requests).
    """
    def _make(json_data=None, **kwargs):
        transport, sent = recording_transport(json_data, **kwargs)
        client = OzonClient.configure("123456", "secret-key", transport=transport)
        return client, sent
    return _make


# All resource modules that import OzonClient
_RESOURCE_MODULES = [
    "ozon_seller.resources.auth",
    "ozon_seller.resources.prices",
    "ozon_seller.resources.products",
    "ozon_seller.resources.stock",
]


@pytest.fixture
def mock_ozon_class():
    """Patch OzonClient in all resource modules, yield (mock_class, mock_instance).

    Usage:
        def test_something(mock_ozon_class):
            mock_class, mock_instance = mock_ozon_class
            mock_instance.update_prices = AsyncMock(return_value={...})
    """
    mock_instance = MagicMock()
    mock_class = MagicMock()
    mock_class.from_env.return_value = mock_instance

    patchers = [patch(f"{mod}.OzonClient", mock_class) for mod in _RESOURCE_MODULES]
    for p in patchers:
        p.start()
    yield mock_class, mock_instance
    for p in patchers:
        p.stop()
