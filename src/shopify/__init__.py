"""
Shopify integration modules.

Modules:
    api_client - REST client for the Shopify Admin API
    errors     - Exception hierarchy (RequestFailure, RateLimited, ...)
    retry      - Exponential backoff on rate-limited requests
    pagination - Cursor-based walk over the products listing
"""

from .api_client import ApiResponse, ShopifyAPIClient
from .errors import ConfigError, RateLimited, RequestFailure, ShopifyError
from .pagination import iter_product_pages
from .retry import fetch_with_retry, send_with_retry

__all__ = [
    # API Client
    'ApiResponse',
    'ShopifyAPIClient',
    # Errors
    'ShopifyError',
    'ConfigError',
    'RequestFailure',
    'RateLimited',
    # Retry / pagination
    'fetch_with_retry',
    'send_with_retry',
    'iter_product_pages',
]
