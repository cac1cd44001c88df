import argparse
import logging
import sys

import requests

from restock_sync import settings
from restock_sync.errors import RestockSyncError
from restock_sync.logger import setup_logger
from restock_sync.pipelines.restock_dates import RestockDatePipeline
from restock_sync.shopify_client import ShopifyClient

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Sync restock dates of out-of-stock SKUs from the sheet to Shopify variant metafields"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Resolve variants and show what would be written without calling metafieldsSet",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log per-batch progress (DEBUG level)"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logger(log_level=logging.DEBUG if args.verbose else settings.LOG_LEVEL)

    client = ShopifyClient(
        settings.SHOPIFY_STORE,
        settings.SHOPIFY_ADMIN_TOKEN,
        api_version=settings.SHOPIFY_API_VERSION,
        timeout=settings.REQUEST_TIMEOUT,
    )
    pipeline = RestockDatePipeline(
        client,
        settings.SHEET_CSV_URL,
        dry_run=args.dry_run,
        timeout=settings.REQUEST_TIMEOUT,
    )

    try:
        pipeline.run()
    except (RestockSyncError, requests.RequestException):
        logger.exception("❌ Restock sync failed.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
