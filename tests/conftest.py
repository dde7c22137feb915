"""
Root test configuration and fixtures for the assetverse project.

This conftest.py provides common fixtures for all test categories:
- unit/: Fast, isolated unit tests against mocks and the in-memory store

Note: sys.path manipulation is handled here to ensure imports work correctly.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

# Add project root to path to allow imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tests.fixtures.store import FIXED_NOW, InMemoryStore  # noqa: E402


def create_mock_pocketbase():
    """Create a mock PocketBase instance with one shared collection mock."""
    mock_pb = Mock()

    mock_collection = Mock()

    # Collection auth (for _superusers collection)
    mock_collection.auth_with_password = Mock(return_value=True)

    # Mock list response
    mock_list_response = Mock()
    mock_list_response.items = []
    mock_list_response.total_items = 0
    mock_list_response.total_pages = 1
    mock_list_response.page = 1
    mock_list_response.per_page = 1

    mock_collection.get_full_list = Mock(return_value=[])
    mock_collection.get_list = Mock(return_value=mock_list_response)
    mock_collection.get_one = Mock()
    mock_collection.get_first_list_item = Mock()
    mock_collection.create = Mock(return_value=Mock(id="mock-id"))
    mock_collection.update = Mock()
    mock_collection.delete = Mock(return_value=True)

    # Make collection callable to return itself for chaining
    mock_pb.collection = Mock(return_value=mock_collection)

    mock_pb.auth_store = Mock()
    mock_pb.auth_store.base_token = "mock-token"

    return mock_pb


@pytest.fixture
def mock_pocketbase():
    """Create a mock PocketBase instance for tests that need it."""
    return create_mock_pocketbase()


@pytest.fixture(autouse=True)
def mock_all_external_services():
    """Keep every test away from a real PocketBase server.

    Startup authentication is skipped and the cached settings are dropped so
    tests that patch the environment see their own values.
    """
    from api.settings import get_settings

    get_settings.cache_clear()
    with patch.dict(os.environ, {"SKIP_PB_AUTH": "true"}):
        yield
    get_settings.cache_clear()


# =============================================================================
# In-memory store fixtures
# =============================================================================


@pytest.fixture
def store():
    """Empty in-memory store standing in for PocketBase."""
    return InMemoryStore()


@pytest.fixture
def seeded_store(store):
    """Store with one HR (limit 2), one asset with stock and one pending request."""
    store.add_user(
        email="hr@acme.test",
        name="Hana Reyes",
        role="hr",
        package_limit=2,
        company_name="Acme",
        company_logo="https://cdn.acme.test/logo.png",
    )
    store.add_user(email="emp1@acme.test", name="Eli Park")
    store.add_asset(
        id="asset-laptop",
        product_name="Laptop",
        product_type="Returnable",
        product_quantity=3,
        available_quantity=3,
        hr_email="hr@acme.test",
    )
    store.add_request(
        id="req-1",
        asset_id="asset-laptop",
        requester_email="emp1@acme.test",
        requester_name="Eli Park",
        hr_email="hr@acme.test",
    )
    return store


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW
