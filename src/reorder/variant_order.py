"""
Variant Reorder

Moves a product's "bolt" variant ahead of its "sample" variant by swapping
their positions with two sequenced PUTs.

The bolt variant is moved into the sample's slot first, then the sample is
given the bolt's old slot. Between the two writes both variants share a
position in the store. There is no rollback: if the second write fails the
product is left with only the first one applied.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from ..models import Product, Variant
from ..shopify.api_client import ShopifyAPIClient
from ..shopify.retry import DEFAULT_INITIAL_DELAY, DEFAULT_MAX_ATTEMPTS, send_with_retry

logger = logging.getLogger(__name__)

SAMPLE_KEYWORD = "sample"
BOLT_KEYWORD = "bolt"
PACING_DELAY = 1.0  # seconds after each variant write


@dataclass(frozen=True)
class SwapPlan:
    """Positions before the swap; after it they are exchanged."""
    product: Product
    sample: Variant
    bolt: Variant


def find_first(variants: Iterable[Variant], keyword: str) -> Optional[Variant]:
    """First variant whose title contains keyword (case-insensitive). Later matches are ignored."""
    keyword = keyword.lower()
    return next((v for v in variants if keyword in v.title.lower()), None)


def plan_swap(product: Product) -> Optional[SwapPlan]:
    """Return a SwapPlan if the sample variant sits before the bolt variant."""
    sample = find_first(product.variants, SAMPLE_KEYWORD)
    bolt = find_first(product.variants, BOLT_KEYWORD)
    if sample is None or bolt is None:
        return None
    if sample.position >= bolt.position:
        return None
    return SwapPlan(product=product, sample=sample, bolt=bolt)


def update_variant_position(
    client: ShopifyAPIClient,
    variant_id,
    position: int,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """PUT a variant's new position, retrying on 429."""
    payload = {"variant": {"id": variant_id, "position": position}}
    send_with_retry(client, "PUT", f"variants/{variant_id}.json", payload,
                    max_attempts=max_attempts, initial_delay=DEFAULT_INITIAL_DELAY,
                    sleep=sleep)


def reorder_if_needed(
    client: ShopifyAPIClient,
    product: Product,
    dry_run: bool = False,
    pacing_delay: float = PACING_DELAY,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    sleep: Callable[[float], None] = time.sleep,
) -> Optional[SwapPlan]:
    """
    Swap the sample and bolt variant positions if sample comes first.

    Args:
        client: API client
        product: Product snapshot from the listing
        dry_run: If True, only log what would change
        pacing_delay: Seconds to wait after each write
        max_attempts: Rate-limit retries per write
        sleep: Sleep function (injectable for tests)

    Returns:
        The SwapPlan that was applied, or None if nothing needed to change

    Raises:
        RequestFailure: If either write fails
    """
    plan = plan_swap(product)
    if plan is None:
        return None

    sample, bolt = plan.sample, plan.bolt
    logger.info('Reordering Product ID: %s - "%s"', product.id, product.title)
    logger.info("Current order: Sample (pos: %d) before Bolt (pos: %d)",
                sample.position, bolt.position)

    if dry_run:
        logger.info("[DRY RUN] Would move Bolt to %d and Sample to %d",
                    sample.position, bolt.position)
        return plan

    update_variant_position(client, bolt.id, sample.position,
                            max_attempts=max_attempts, sleep=sleep)
    sleep(pacing_delay)
    update_variant_position(client, sample.id, bolt.position,
                            max_attempts=max_attempts, sleep=sleep)
    sleep(pacing_delay)

    logger.info("Reorder complete: Bolt (pos: %d), Sample (pos: %d)",
                sample.position, bolt.position)
    return plan
