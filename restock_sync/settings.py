import os
from pathlib import Path
from dotenv import load_dotenv

# --- Base Directory ---
BASE_DIR = Path(__file__).resolve().parent.parent

# --- Load Environment Variables ---
load_dotenv(BASE_DIR / ".env")

# --- Shopify Connection ---
# Missing values are not validated here; they surface as request failures.
SHOPIFY_STORE = os.getenv("SHOPIFY_STORE", "")
SHOPIFY_ADMIN_TOKEN = os.getenv("SHOPIFY_ADMIN_TOKEN", "")
SHOPIFY_API_VERSION = os.getenv("SHOPIFY_API_VERSION", "2025-07")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30"))

# --- Feed ---
# Published Google Sheet (or any CSV export): A=SKU, B=stock, C=restock date
SHEET_CSV_URL = os.getenv("SHEET_CSV_URL", "")

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = BASE_DIR / os.getenv("LOG_DIR", "logs")

# --- Metafield Definition ---
METAFIELD_NAMESPACE = "custom"
METAFIELD_KEY = "restock_date"
METAFIELD_TYPE = "single_line_text_field"

# --- Shopify API Limits ---
# productVariants search: keep the query string short and the result set under `first`.
RESOLVE_BATCH_SIZE = 20
VARIANT_QUERY_LIMIT = 100
# metafieldsSet accepts at most 25 inputs per call.
WRITE_BATCH_SIZE = 25
