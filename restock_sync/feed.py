import logging

import pandas as pd
import requests

from .schemas import FeedRecord

logger = logging.getLogger(__name__)

FEED_COLUMNS = ["sku", "stock", "restock_date"]


def fetch_feed_text(url: str, timeout: float = 30) -> str:
    """Downloads the CSV export. utf-8-sig drops the BOM some spreadsheet exports add."""
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    return response.content.decode("utf-8-sig")


def split_rows(text: str) -> list[list[str]]:
    """
    Minimal CSV split: commas only, no quoted fields.
    A value containing a comma will shift the remaining columns of its row.
    """
    return [line.split(",") for line in text.replace("\r", "").strip().split("\n")]


def parse_feed(text: str) -> list[FeedRecord]:
    """
    Turns the raw sheet export into FeedRecords.
    - Row 0 is the header and is always skipped.
    - Columns are positional: A=SKU, B=stock, C=restock date.
    - Rows with a blank SKU are dropped.
    """
    rows = split_rows(text)[1:]
    if not rows:
        return []

    # Pad short rows and ignore anything past column C
    df = pd.DataFrame(
        [(row + [""] * len(FEED_COLUMNS))[: len(FEED_COLUMNS)] for row in rows],
        columns=FEED_COLUMNS,
    )
    for col in FEED_COLUMNS:
        df[col] = df[col].str.strip()

    df = df[df["sku"] != ""].copy()

    # A blank stock cell counts as 0; anything non-numeric becomes NaN
    df["stock"] = pd.to_numeric(df["stock"].replace("", "0"), errors="coerce")

    return [FeedRecord(**row) for row in df.to_dict("records")]


def load_feed(url: str, timeout: float = 30) -> list[FeedRecord]:
    logger.info(f"📥 Fetching restock feed: {url}")
    records = parse_feed(fetch_feed_text(url, timeout=timeout))
    logger.info(f"  > Loaded {len(records)} SKU rows.")
    return records


def select_targets(records: list[FeedRecord]) -> list[FeedRecord]:
    """Keeps only rows whose stock is exactly zero."""
    return [record for record in records if record.is_out_of_stock]
