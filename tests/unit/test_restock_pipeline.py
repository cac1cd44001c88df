"""
Unit tests for the end-to-end restock date pipeline.

The feed fetch is patched; Shopify is the scripted fake client.
"""

from unittest.mock import MagicMock, patch

import pytest

from restock_sync.errors import MetafieldUserError, TransportError
from restock_sync.pipelines.restock_dates import RestockDatePipeline
from tests.factories import SAMPLE_FEED, FakeShopifyClient, make_catalog, make_feed

FEED_URL = "https://example.com/restock.csv"


def _run(client, feed_text, dry_run=False):
    pipeline = RestockDatePipeline(client, FEED_URL, dry_run=dry_run)
    with patch("restock_sync.feed.fetch_feed_text", return_value=feed_text) as fetch:
        summary = pipeline.run()
    return summary, fetch


class TestRestockDatePipeline:

    def test_sample_feed_syncs_two_variants(self):
        client = FakeShopifyClient(catalog=make_catalog(["A1", "C3"]))

        summary, fetch = _run(client, SAMPLE_FEED)

        fetch.assert_called_once()
        assert fetch.call_args.args[0] == FEED_URL
        assert summary.status == "synced"
        assert (summary.targets, summary.resolved, summary.written, summary.batches) == (2, 2, 2, 1)
        sent = client.mutation_calls[0]["metafields"]
        assert [m["value"] for m in sent] == ["2025-09-01", "2025-10-15"]

    def test_connectivity_checked_first(self):
        client = FakeShopifyClient(catalog=make_catalog(["A1", "C3"]))
        _run(client, SAMPLE_FEED)
        assert client.shop_checks == 1

    def test_connectivity_failure_aborts_before_feed(self):
        client = MagicMock()
        client.shop_name.side_effect = TransportError(401, "Unauthorized", "https://x/graphql", {})
        pipeline = RestockDatePipeline(client, FEED_URL)

        with patch("restock_sync.feed.fetch_feed_text") as fetch:
            with pytest.raises(TransportError):
                pipeline.run()

        fetch.assert_not_called()
        client.execute.assert_not_called()

    def test_no_targets_skips_resolver_and_writer(self):
        client = FakeShopifyClient(catalog=make_catalog(["A1"]))

        summary, _ = _run(client, make_feed([("A1", "3", ""), ("B2", "n/a", "")]))

        assert summary.status == "no_targets"
        assert client.calls == []

    def test_nothing_resolved_skips_writer(self):
        client = FakeShopifyClient(catalog={})

        summary, _ = _run(client, SAMPLE_FEED)

        assert summary.status == "unresolved"
        assert summary.targets == 2
        assert len(client.search_calls) == 1
        assert client.mutation_calls == []

    def test_partial_resolution_writes_resolved_only(self):
        client = FakeShopifyClient(catalog=make_catalog(["C3"]))

        summary, _ = _run(client, SAMPLE_FEED)

        assert summary.status == "synced"
        assert summary.written == 1
        assert client.mutation_calls[0]["metafields"][0]["value"] == "2025-10-15"

    def test_45_targets_batching(self):
        skus = [f"SKU-{i:02d}" for i in range(45)]
        client = FakeShopifyClient(catalog=make_catalog(skus))

        summary, _ = _run(client, make_feed([(sku, "0", "2025-12-01") for sku in skus]))

        assert [len(c["q"].split(" OR ")) for c in client.search_calls] == [20, 20, 5]
        assert [len(c["metafields"]) for c in client.mutation_calls] == [25, 20]
        assert summary.batches == 2
        assert summary.written == 45

    def test_user_error_stops_run(self):
        skus = [f"SKU-{i:02d}" for i in range(45)]
        client = FakeShopifyClient(catalog=make_catalog(skus), user_errors_on_batch=1)

        with pytest.raises(MetafieldUserError):
            _run(client, make_feed([(sku, "0", "2025-12-01") for sku in skus]))

        assert len(client.mutation_calls) == 1

    def test_dry_run_skips_mutations(self):
        client = FakeShopifyClient(catalog=make_catalog(["A1", "C3"]))

        summary, _ = _run(client, SAMPLE_FEED, dry_run=True)

        assert summary.status == "dry_run"
        assert summary.resolved == 2
        assert summary.written == 0
        assert len(client.search_calls) == 1
        assert client.mutation_calls == []
