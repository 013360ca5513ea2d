"""Shared fixtures for Confluence unit tests."""

import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Add the root tests directory to PYTHONPATH
sys.path.append(str(Path(__file__).parent.parent.parent))

from fixtures.confluence_mocks import (  # noqa: E402
    MOCK_ATTACHMENTS_RESPONSE,
    MOCK_BASE_URL,
    MOCK_CQL_SEARCH_RESPONSE,
    MOCK_CURRENT_USER_RESPONSE,
)

from confluence_sdk.confluence import ConfluenceFetcher  # noqa: E402
from confluence_sdk.confluence.config import ConfluenceConfig  # noqa: E402


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for testing."""
    with patch.dict(
        "os.environ",
        {
            "CONFLUENCE_URL": MOCK_BASE_URL,
            "CONFLUENCE_USERNAME": "test_user",
            "CONFLUENCE_API_TOKEN": "test_token",
        },
    ):
        yield


@pytest.fixture
def mock_config():
    """Return a ConfluenceConfig instance for a cloud site."""
    return ConfluenceConfig(
        url=MOCK_BASE_URL,
        auth_type="basic",
        username="test_user",
        api_token="test_token",
    )


@pytest.fixture
def mock_atlassian_confluence():
    """Mock the Atlassian Confluence client."""
    with patch("confluence_sdk.confluence.client.Confluence") as mock:
        confluence_instance = mock.return_value

        confluence_instance.cql.return_value = MOCK_CQL_SEARCH_RESPONSE

        def fake_get(path, *args, **kwargs):
            if path == "rest/api/user/current":
                return MOCK_CURRENT_USER_RESPONSE
            if path.endswith("/child/attachment"):
                return MOCK_ATTACHMENTS_RESPONSE
            return {}

        confluence_instance.get.side_effect = fake_get
        yield confluence_instance


@pytest.fixture
def confluence_fetcher(mock_config, mock_atlassian_confluence):
    """Create a ConfluenceFetcher with the Atlassian client mocked out."""
    fetcher = ConfluenceFetcher(config=mock_config)
    fetcher.confluence = mock_atlassian_confluence
    yield fetcher
