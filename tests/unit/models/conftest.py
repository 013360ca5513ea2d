"""
Test fixtures for model testing.
"""

from typing import Any

import pytest

from fixtures.confluence_mocks import (
    MOCK_ATTACHMENTS_RESPONSE,
    MOCK_CQL_SEARCH_RESPONSE,
    MOCK_PAGE_CONTENT,
    MOCK_SPACES_RESPONSE,
)


@pytest.fixture
def confluence_search_data() -> dict[str, Any]:
    """Return mock Confluence search (CQL) results."""
    return MOCK_CQL_SEARCH_RESPONSE


@pytest.fixture
def confluence_page_data() -> dict[str, Any]:
    """Return mock Confluence page data."""
    return MOCK_PAGE_CONTENT


@pytest.fixture
def confluence_spaces_data() -> dict[str, Any]:
    """Return a mock page of Confluence spaces."""
    return MOCK_SPACES_RESPONSE


@pytest.fixture
def confluence_attachments_data() -> dict[str, Any]:
    """Return a mock page of Confluence attachments."""
    return MOCK_ATTACHMENTS_RESPONSE
