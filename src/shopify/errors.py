"""
Shopify Errors

Exception hierarchy raised by the API client and everything built on it.
"""

from typing import Any, Optional


class ShopifyError(Exception):
    """Base class for all errors raised by this package."""


class ConfigError(ShopifyError):
    """Required store configuration is missing."""


class RequestFailure(ShopifyError):
    """
    A request returned a non-2xx status or never got a response.

    Attributes:
        status: HTTP status code, or None for transport-level errors
        payload: Parsed JSON body, raw response text, or error message
    """

    def __init__(self, status: Optional[int], payload: Any = None):
        self.status = status
        self.payload = payload
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.status is None:
            return str(self.payload)
        return f"HTTP {self.status}: {self.payload}"


class RateLimited(RequestFailure):
    """HTTP 429 Too Many Requests."""

    def __init__(self, payload: Any = None):
        super().__init__(429, payload)
