"""
Shopify API Client

Thin client for the Shopify Admin REST API.
Handles authentication, URL building and turning HTTP errors into exceptions.
Retries live in retry.py so callers decide which requests get them.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional
from urllib.parse import urljoin

import requests

from .errors import RateLimited, RequestFailure

logger = logging.getLogger(__name__)


@dataclass
class ApiResponse:
    """Successful (2xx) response from the Admin API."""
    status_code: int
    body: Dict[str, Any]
    headers: Dict[str, str] = field(default_factory=dict)


class ShopifyAPIClient:
    """
    Client for the Shopify Admin REST API.

    Usage:
        with ShopifyAPIClient(shop="my-store", access_token="shpat_xxx") as client:
            response = client.get("products.json?limit=250")
            client.put("variants/1.json", {"variant": {"id": 1, "position": 2}})
    """

    API_VERSION = "2023-10"

    def __init__(self, shop: str, access_token: str, api_version: Optional[str] = None):
        """
        Initialize the API client.

        Args:
            shop: Shop name (without .myshopify.com) or full domain
            access_token: Shopify Admin API access token
            api_version: Admin API version (defaults to API_VERSION)
        """
        # Normalize shop name
        if ".myshopify.com" in shop:
            self.shop = shop.replace("https://", "").replace("http://", "").split(".myshopify.com")[0]
        else:
            self.shop = shop

        self.api_version = api_version or self.API_VERSION
        self.base_url = f"https://{self.shop}.myshopify.com/admin/api/{self.api_version}/"

        self.session = requests.Session()
        self.session.headers.update({
            "X-Shopify-Access-Token": access_token,
            "Content-Type": "application/json",
        })

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.session.close()

    def close(self):
        self.session.close()

    def request(
        self,
        method: str,
        endpoint: str,
        data: Optional[Dict] = None,
        timeout: int = 30
    ) -> ApiResponse:
        """
        Make a single REST API request.

        Args:
            method: HTTP method (GET or PUT)
            endpoint: Path relative to the base URL (e.g., "products.json?limit=250")
            data: JSON body for PUT
            timeout: Request timeout in seconds

        Returns:
            ApiResponse for any 2xx status

        Raises:
            RateLimited: On HTTP 429
            RequestFailure: On any other non-2xx status or network error
        """
        url = urljoin(self.base_url, endpoint)
        logger.debug("%s %s", method, endpoint)

        try:
            if method == "GET":
                response = self.session.get(url, timeout=timeout)
            elif method == "PUT":
                response = self.session.put(url, json=data, timeout=timeout)
            else:
                raise ValueError(f"Unsupported method: {method}")
        except requests.exceptions.RequestException as e:
            raise RequestFailure(None, str(e)) from e

        if response.status_code == 429:
            raise RateLimited(_payload(response))
        if not 200 <= response.status_code < 300:
            raise RequestFailure(response.status_code, _payload(response))

        return ApiResponse(
            status_code=response.status_code,
            body=_json_body(response),
            headers=dict(response.headers),
        )

    def get(self, endpoint: str, timeout: int = 30) -> ApiResponse:
        return self.request("GET", endpoint, timeout=timeout)

    def put(self, endpoint: str, data: Dict, timeout: int = 30) -> ApiResponse:
        return self.request("PUT", endpoint, data, timeout=timeout)

    def test_connection(self, sleep: Callable[[float], None] = time.sleep) -> bool:
        """
        Test API connection by fetching shop info.

        Rate-limited responses are retried like any other read.

        Returns:
            True if connection successful
        """
        from .retry import fetch_with_retry

        try:
            result = fetch_with_retry(self, "shop.json", sleep=sleep).body
        except RequestFailure as e:
            logger.error("Connection check failed: %s", e)
            return False

        if "shop" in result:
            logger.info("Connected to: %s", result["shop"].get("name", "Unknown"))
            return True
        return False


def _json_body(response) -> Dict[str, Any]:
    """Parse a JSON object body; empty or non-JSON bodies become {}."""
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _payload(response) -> Any:
    """Best-effort error payload: JSON if available, otherwise truncated text."""
    try:
        return response.json()
    except ValueError:
        return response.text[:200]
