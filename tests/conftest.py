"""
Shared test fixtures.

No test talks to the network: the Shopify client is replaced by a scripted
fake and requests calls are patched.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

import pytest
from unittest.mock import MagicMock

from tests.factories import FakeShopifyClient


@pytest.fixture
def fake_client():
    return FakeShopifyClient()


@pytest.fixture
def mock_response():
    """Builds a MagicMock shaped like requests.Response."""

    def _make(text: str = "", status_code: int = 200, reason: str = "OK"):
        response = MagicMock()
        response.text = text
        response.content = text.encode("utf-8")
        response.status_code = status_code
        response.reason = reason
        response.ok = 200 <= status_code < 300
        return response

    return _make
