"""
Reorder Runner

Drives the whole catalog through the variant reorder, one product at a time.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable

from ..shopify.api_client import ShopifyAPIClient
from ..shopify.pagination import DEFAULT_PAGE_SIZE, iter_product_pages
from ..shopify.retry import DEFAULT_MAX_ATTEMPTS
from .variant_order import PACING_DELAY, reorder_if_needed

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    pages: int = 0
    products: int = 0
    reordered: int = 0


def run(
    client: ShopifyAPIClient,
    page_size: int = DEFAULT_PAGE_SIZE,
    dry_run: bool = False,
    pacing_delay: float = PACING_DELAY,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    sleep: Callable[[float], None] = time.sleep,
) -> RunSummary:
    """
    Check and reorder every product in the store.

    Products are processed strictly in listing order; any RequestFailure
    aborts the run and propagates to the caller.
    """
    summary = RunSummary()

    for batch in iter_product_pages(client, page_size=page_size,
                                    max_attempts=max_attempts, sleep=sleep):
        summary.pages += 1
        logger.info("Processing page %d with %d products...", batch.page_number, len(batch))

        for product in batch.products:
            summary.products += 1
            plan = reorder_if_needed(client, product, dry_run=dry_run,
                                     pacing_delay=pacing_delay,
                                     max_attempts=max_attempts, sleep=sleep)
            if plan is not None:
                summary.reordered += 1

    logger.info("Finished processing all products: %d pages, %d products, %d reordered",
                summary.pages, summary.products, summary.reordered)
    return summary
