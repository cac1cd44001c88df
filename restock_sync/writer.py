import logging
from typing import Sequence

from . import settings
from .errors import MetafieldUserError
from .schemas import FeedRecord, MetafieldInput
from .shopify_client import ShopifyClient
from .utils import chunked

logger = logging.getLogger(__name__)

METAFIELDS_SET_MUTATION = """
mutation($metafields: [MetafieldsSetInput!]!) {
  metafieldsSet(metafields: $metafields) {
    metafields { key namespace value owner { __typename ... on ProductVariant { id } } }
    userErrors { field message }
  }
}
"""


def build_metafield_inputs(
    targets: Sequence[FeedRecord], variant_ids: dict[str, str]
) -> list[MetafieldInput]:
    """Joins targets with resolved variant ids; unresolved SKUs are dropped."""
    return [
        MetafieldInput(owner_id=variant_ids[target.sku], value=target.restock_date)
        for target in targets
        if variant_ids.get(target.sku)
    ]


def write_metafields(
    client: ShopifyClient,
    entries: Sequence[MetafieldInput],
    batch_size: int = settings.WRITE_BATCH_SIZE,
) -> int:
    """
    Sends metafieldsSet in batches and returns the number of batches sent.
    The first batch with userErrors aborts the rest. Shopify may already have
    committed the valid entries of that batch.
    """
    batches = chunked(entries, batch_size)

    for i, group in enumerate(batches, start=1):
        logger.info(f"  > Writing batch {i}/{len(batches)} ({len(group)} metafields)")
        data = client.execute(
            METAFIELDS_SET_MUTATION,
            {"metafields": [entry.model_dump(by_alias=True) for entry in group]},
        )
        user_errors = data["metafieldsSet"].get("userErrors") or []
        if user_errors:
            logger.error(f"❌ metafieldsSet returned {len(user_errors)} user error(s):")
            for error in user_errors:
                logger.error(f"    - {error.get('field')}: {error.get('message')}")
            raise MetafieldUserError(user_errors)

    return len(batches)
