import json
import logging
from typing import Any, Optional

import requests

from .errors import QueryError, TransportError

logger = logging.getLogger(__name__)

SHOP_NAME_QUERY = "{ shop { name } }"


class ShopifyClient:
    """
    Thin wrapper around the Shopify Admin GraphQL endpoint.
    One POST per call, no retries. Non-2xx responses raise TransportError,
    top-level GraphQL errors raise QueryError.
    """

    def __init__(
        self,
        store_domain: str,
        access_token: str,
        api_version: str = "2025-07",
        timeout: float = 30,
    ):
        self.endpoint = f"https://{store_domain}/admin/api/{api_version}/graphql"
        self.timeout = timeout
        self.headers = {
            "Content-Type": "application/json",
            "X-Shopify-Access-Token": access_token,
        }

    def execute(self, query: str, variables: Optional[dict[str, Any]] = None) -> dict:
        """Runs a query or mutation and returns the `data` field of the payload."""
        response = requests.post(
            self.endpoint,
            json={"query": query, "variables": variables or {}},
            headers=self.headers,
            timeout=self.timeout,
        )

        text = response.text
        try:
            payload = json.loads(text) if text else {}
        except ValueError:
            # Keep the raw body (e.g. an HTML error page) for diagnostics
            payload = {"errors": text}

        if not response.ok:
            raise TransportError(
                response.status_code, response.reason, self.endpoint, payload
            )
        if isinstance(payload, dict) and payload.get("errors") is not None:
            raise QueryError(payload["errors"])

        return payload.get("data") if isinstance(payload, dict) else None

    def shop_name(self) -> str:
        """Connectivity check: confirms the endpoint and token are usable."""
        data = self.execute(SHOP_NAME_QUERY)
        return data["shop"]["name"]
