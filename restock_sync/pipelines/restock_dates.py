import logging

from restock_sync import feed, resolver, settings, writer
from restock_sync.pipeline import DataPipeline
from restock_sync.schemas import FeedRecord, MetafieldInput, SyncSummary
from restock_sync.shopify_client import ShopifyClient

logger = logging.getLogger(__name__)


class RestockDatePipeline(DataPipeline):
    """
    Sheet -> Shopify sync of `custom.restock_date` for out-of-stock variants.
    """

    def __init__(
        self,
        client: ShopifyClient,
        feed_url: str,
        dry_run: bool = False,
        timeout: float = settings.REQUEST_TIMEOUT,
    ):
        super().__init__("restock date sync", dry_run=dry_run)
        self.client = client
        self.feed_url = feed_url
        self.timeout = timeout
        self.targets: list[FeedRecord] = []
        self.variant_ids: dict[str, str] = {}

    def preflight(self) -> None:
        logger.info("🔌 Checking Shopify connection...")
        shop_name = self.client.shop_name()
        logger.info(f"✅ Connected. Shop name: {shop_name}")

    def extract(self) -> list[FeedRecord] | SyncSummary:
        records = feed.load_feed(self.feed_url, timeout=self.timeout)
        self.targets = feed.select_targets(records)

        skus = ", ".join(record.sku for record in self.targets) or "(none)"
        logger.info(f"Target SKUs: {skus}")

        if not self.targets:
            logger.info("No zero-stock SKUs in the feed. Skipping sync.")
            return SyncSummary(status="no_targets")
        return self.targets

    def transform(self, targets: list[FeedRecord]) -> list[MetafieldInput] | SyncSummary:
        logger.info("\n--- Resolving SKUs to variants ---")
        self.variant_ids = resolver.resolve_variant_ids(
            self.client, [target.sku for target in targets]
        )
        resolved = sum(1 for target in targets if self.variant_ids.get(target.sku))
        logger.info(f"  > Resolved {resolved} of {len(targets)} SKUs.")

        entries = writer.build_metafield_inputs(targets, self.variant_ids)
        if not entries:
            logger.warning(
                "⚠️ SKU -> variant resolution came back empty. Check the SKU spelling in the sheet."
            )
            return SyncSummary(status="unresolved", targets=len(targets))
        return entries

    def load(self, entries: list[MetafieldInput]) -> SyncSummary:
        if self.dry_run:
            logger.info("🧪 Dry run: skipping metafieldsSet. Would write:")
            for entry in entries:
                logger.info(f"    - {entry.owner_id}: '{entry.value}'")
            return SyncSummary(
                status="dry_run", targets=len(self.targets), resolved=len(entries)
            )

        logger.info(f"\n--- Writing {settings.METAFIELD_NAMESPACE}.{settings.METAFIELD_KEY} ---")
        batches = writer.write_metafields(self.client, entries)
        logger.info("✅ restock_date synced.")
        return SyncSummary(
            status="synced",
            targets=len(self.targets),
            resolved=len(entries),
            written=len(entries),
            batches=batches,
        )
