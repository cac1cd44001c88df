"""
Exceptions raised by the restock sync job.

Every error here is fatal: nothing is retried, and main.py turns any of them
into a non-zero exit code.
"""

import json
from typing import Any


class RestockSyncError(Exception):
    """Base class for all sync failures."""


class ShopifyAPIError(RestockSyncError):
    """A call to the Shopify Admin GraphQL endpoint failed."""


class TransportError(ShopifyAPIError):
    """The endpoint answered with a non-2xx HTTP status."""

    def __init__(self, status_code: int, reason: str, endpoint: str, body: Any):
        self.status_code = status_code
        self.reason = reason
        self.endpoint = endpoint
        self.body = body
        body_text = json.dumps(body) if isinstance(body, (dict, list)) else str(body)
        super().__init__(
            f"HTTP {status_code} {reason}\nendpoint: {endpoint}\nbody: {body_text}"
        )


class QueryError(ShopifyAPIError):
    """The response carried a top-level GraphQL `errors` list."""

    def __init__(self, errors: Any):
        self.errors = errors
        super().__init__(f"GraphQL errors: {json.dumps(errors, indent=2)}")


class MetafieldUserError(RestockSyncError):
    """metafieldsSet returned userErrors for a batch."""

    def __init__(self, errors: list[dict]):
        self.errors = errors
        super().__init__(f"metafieldsSet failed with {len(errors)} user error(s).")
