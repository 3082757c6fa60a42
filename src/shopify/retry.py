"""
Backoff Retry

Retries Admin API requests that hit the rate limit (HTTP 429), doubling the
wait after each attempt. Every other failure propagates on the first try.
"""

import logging
import time
from typing import Callable, Dict, Optional

from .api_client import ApiResponse, ShopifyAPIClient
from .errors import RateLimited

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 5
DEFAULT_INITIAL_DELAY = 1.0  # seconds


def send_with_retry(
    client: ShopifyAPIClient,
    method: str,
    path: str,
    data: Optional[Dict] = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    initial_delay: float = DEFAULT_INITIAL_DELAY,
    sleep: Callable[[float], None] = time.sleep,
) -> ApiResponse:
    """
    Send a request, retrying on 429 with exponential backoff.

    The initial request is not counted against max_attempts, so at most
    max_attempts + 1 requests are made.

    Args:
        client: API client used for the request
        method: HTTP method (GET or PUT)
        path: Endpoint relative to the API base URL
        data: JSON body for PUT
        max_attempts: Retries allowed after the initial request
        initial_delay: Wait before the first retry, in seconds
        sleep: Sleep function (injectable for tests)

    Returns:
        The first successful ApiResponse

    Raises:
        RateLimited: If the last permitted attempt is still rate limited
        RequestFailure: On any non-429 failure
    """
    retries_left = max_attempts
    delay = initial_delay

    while True:
        try:
            return client.request(method, path, data)
        except RateLimited:
            if retries_left <= 0:
                logger.error("Rate limit retries exhausted for %s %s", method, path)
                raise
            logger.warning("Received 429 Too Many Requests on %s. Retrying in %g seconds...",
                           path, delay)
            sleep(delay)
            retries_left -= 1
            delay *= 2


def fetch_with_retry(
    client: ShopifyAPIClient,
    path: str,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    initial_delay: float = DEFAULT_INITIAL_DELAY,
    sleep: Callable[[float], None] = time.sleep,
) -> ApiResponse:
    """GET with rate-limit backoff. See send_with_retry."""
    return send_with_retry(client, "GET", path, max_attempts=max_attempts,
                           initial_delay=initial_delay, sleep=sleep)
