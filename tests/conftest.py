"""Shared test fixtures."""

from unittest.mock import MagicMock

import pytest

from src.models import Product, Variant
from src.shopify.api_client import ApiResponse, ShopifyAPIClient


def _make_response(body=None, headers=None, status_code=200):
    return ApiResponse(status_code=status_code, body=body or {}, headers=headers or {})


def _next_link(cursor, limit=250):
    return (
        f"<https://test-store.myshopify.com/admin/api/2023-10/products.json"
        f'?limit={limit}&page_info={cursor}>; rel="next"'
    )


@pytest.fixture
def make_response():
    """Factory for ApiResponse objects as ShopifyAPIClient.request returns them."""
    return _make_response


@pytest.fixture
def next_link():
    """Factory for a Link header pointing at the next page."""
    return _next_link


@pytest.fixture
def client():
    """Client whose request() is a mock; set side_effect per test."""
    c = ShopifyAPIClient(shop="test-store", access_token="shpat_test")
    c.request = MagicMock()
    return c


@pytest.fixture
def sleep():
    """Stand-in for time.sleep that records the requested delays."""
    return MagicMock()


@pytest.fixture
def widget():
    """Product with Sample before Bolt (needs reordering)."""
    return Product(
        id=1,
        title="Widget",
        variants=(
            Variant(id=10, title="Sample", position=1),
            Variant(id=11, title="Bolt", position=2),
        ),
    )


@pytest.fixture
def widget_json():
    """The same product as the Admin API returns it."""
    return {
        "id": 1,
        "title": "Widget",
        "variants": [
            {"id": 10, "title": "Sample", "position": 1},
            {"id": 11, "title": "Bolt", "position": 2},
        ],
    }
