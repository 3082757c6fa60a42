#!/usr/bin/env python3
"""
Shopify Variant Reorder

Walks every product in a Shopify store and, where a "Sample" variant is
listed before a "Bolt" variant, swaps their positions so Bolt comes first.

Requirements:
    pip install requests python-dotenv

Usage:
    # Preview which products would change
    python3 reorder_variants.py --dry-run

    # Reorder (credentials from .env / environment)
    python3 reorder_variants.py

    # Explicit credentials
    python3 reorder_variants.py --shop STORE --token TOKEN

Credentials (in order of precedence):
    1. --shop / --token / --api-version flags
    2. SHOPIFY_STORE / SHOPIFY_ACCESS_TOKEN / SHOPIFY_API_VERSION
       environment variables (a .env file is loaded automatically)
"""

import argparse
import logging
import os
import sys

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(__file__))

from src.common.config_loader import load_store_config
from src.common.log_config import setup_logging
from src.reorder import run
from src.shopify import RequestFailure, ShopifyAPIClient, ShopifyError
from src.shopify.pagination import DEFAULT_PAGE_SIZE

logger = logging.getLogger("src.reorder_variants")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Move Bolt variants ahead of Sample variants across a Shopify catalog"
    )
    parser.add_argument(
        "--shop", "-s",
        help="Shopify shop name (e.g., 'my-store' or 'my-store.myshopify.com')"
    )
    parser.add_argument(
        "--token", "-t",
        help="Shopify Admin API access token"
    )
    parser.add_argument(
        "--api-version",
        help=f"Admin API version (default: {ShopifyAPIClient.API_VERSION})"
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=DEFAULT_PAGE_SIZE,
        help=f"Products per page, max 250 (default: {DEFAULT_PAGE_SIZE})"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report products that need reordering without changing them"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) logging"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress info messages, show only warnings and errors"
    )

    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    if not 1 <= args.page_size <= 250:
        parser.error("--page-size must be between 1 and 250")

    try:
        config = load_store_config(args.shop, args.token, args.api_version)
    except ShopifyError as e:
        logger.error("%s", e)
        return 1

    with ShopifyAPIClient(config.shop, config.access_token, config.api_version) as client:
        logger.info("Connecting to Shopify...")
        if not client.test_connection():
            logger.error("Failed to connect. Check shop name and token.")
            return 1

        try:
            summary = run(client, page_size=args.page_size, dry_run=args.dry_run)
        except RequestFailure as e:
            if e.status is not None:
                logger.error("Error occurred: HTTP %d %s", e.status, e.payload)
            else:
                logger.error("Error occurred: %s", e.payload)
            return 1
        except Exception as e:
            logger.error("Error occurred: %r", e)
            return 1

    if args.dry_run:
        print(f"\n[DRY RUN] {summary.reordered} of {summary.products} products would be reordered.")
    else:
        print(f"\nReordered {summary.reordered} of {summary.products} products "
              f"across {summary.pages} pages.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
