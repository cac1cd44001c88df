import logging
from typing import Sequence

from . import settings
from .shopify_client import ShopifyClient
from .utils import chunked

logger = logging.getLogger(__name__)

VARIANTS_BY_SKU_QUERY = """
query($q: String!, $first: Int!) {
  productVariants(first: $first, query: $q) {
    nodes { id sku }
  }
}
"""


def build_sku_query(skus: Sequence[str]) -> str:
    """Shopify search syntax, e.g. 'sku:A1 OR sku:C3'."""
    return " OR ".join(f"sku:{sku}" for sku in skus)


def resolve_variant_ids(
    client: ShopifyClient,
    skus: Sequence[str],
    batch_size: int = settings.RESOLVE_BATCH_SIZE,
) -> dict[str, str]:
    """
    Maps SKU -> ProductVariant GID, one search per batch.
    If Shopify returns several variants with the same SKU, the last one wins.
    SKUs that match nothing are simply missing from the result.
    """
    variant_ids: dict[str, str] = {}
    batches = chunked(skus, batch_size)

    for i, group in enumerate(batches, start=1):
        logger.debug(f"  > Resolving batch {i}/{len(batches)} ({len(group)} SKUs)")
        data = client.execute(
            VARIANTS_BY_SKU_QUERY,
            {"q": build_sku_query(group), "first": settings.VARIANT_QUERY_LIMIT},
        )
        for variant in data["productVariants"]["nodes"]:
            if variant.get("sku"):
                variant_ids[variant["sku"]] = variant["id"]

    return variant_ids
