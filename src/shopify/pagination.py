"""
Product Pagination

Walks the products listing with Shopify's cursor-based pagination.
The cursor (page_info) comes from the rel="next" entry of the Link header.
"""

import logging
import time
from typing import Callable, Dict, Iterator, Mapping, Optional
from urllib.parse import parse_qs, urlencode, urlparse

from requests.utils import parse_header_links

from ..models import Product, ProductBatch
from .api_client import ShopifyAPIClient
from .retry import DEFAULT_INITIAL_DELAY, DEFAULT_MAX_ATTEMPTS, fetch_with_retry

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 250
PRODUCTS_ENDPOINT = "products.json"


def parse_link_header(value: Optional[str]) -> Dict[str, str]:
    """
    Parse a Link header into a mapping of relation name to URL.

    Example:
        '<https://x/products.json?page_info=abc>; rel="next"'
        -> {'next': 'https://x/products.json?page_info=abc'}
    """
    if not value:
        return {}

    links = {}
    for link in parse_header_links(value):
        rel = link.get("rel")
        url = link.get("url")
        if rel and url:
            for name in rel.split():
                links.setdefault(name, url)
    return links


def extract_cursor(url: Optional[str]) -> Optional[str]:
    """Return the page_info query parameter of url, or None."""
    if not url:
        return None
    values = parse_qs(urlparse(url).query).get("page_info")
    if not values or not values[0]:
        return None
    return values[0]


def next_cursor(headers: Mapping[str, str]) -> Optional[str]:
    """Cursor for the next page, taken from a response's Link header."""
    link_header = None
    for key, value in headers.items():
        if key.lower() == "link":
            link_header = value
            break
    return extract_cursor(parse_link_header(link_header).get("next"))


def products_path(page_size: int = DEFAULT_PAGE_SIZE, cursor: Optional[str] = None) -> str:
    params = {"limit": page_size}
    if cursor:
        params["page_info"] = cursor
    return f"{PRODUCTS_ENDPOINT}?{urlencode(params)}"


def iter_product_pages(
    client: ShopifyAPIClient,
    page_size: int = DEFAULT_PAGE_SIZE,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    initial_delay: float = DEFAULT_INITIAL_DELAY,
    sleep: Callable[[float], None] = time.sleep,
) -> Iterator[ProductBatch]:
    """
    Yield every page of products in the store.

    Stops on an empty page or when there is no rel="next" cursor. Each call
    starts again from the first page. Request failures (after rate-limit
    retries) propagate out of the iterator.

    Args:
        client: API client
        page_size: Products per page (Shopify max is 250)
        max_attempts: Rate-limit retries per page request
        initial_delay: First backoff delay in seconds
        sleep: Sleep function (injectable for tests)
    """
    path = products_path(page_size)
    page_number = 0

    while True:
        response = fetch_with_retry(client, path, max_attempts=max_attempts,
                                    initial_delay=initial_delay, sleep=sleep)
        raw_products = response.body.get("products") or []
        if not raw_products:
            logger.debug("Empty page after %d pages, stopping", page_number)
            return

        page_number += 1
        yield ProductBatch(
            page_number=page_number,
            products=tuple(Product.from_api(p) for p in raw_products),
        )

        cursor = next_cursor(response.headers)
        if cursor is None:
            logger.debug("No next page after page %d", page_number)
            return
        path = products_path(page_size, cursor)
