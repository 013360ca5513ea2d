"""Unit tests for the SpacesMixin class."""

from unittest.mock import MagicMock

import pytest
from requests import HTTPError

from fixtures.confluence_mocks import (
    MOCK_SPACE_CONTENTS_RESPONSE,
    MOCK_SPACES_RESPONSE,
)

from confluence_sdk.exceptions import ConfluenceAuthenticationError, InvalidArgumentError
from confluence_sdk.models.confluence import (
    ConfluenceResult,
    ConfluenceSpace,
    PageSource,
    PagingInformation,
)


@pytest.fixture
def spaces_fetcher(confluence_fetcher):
    confluence_fetcher.confluence.get.side_effect = None
    confluence_fetcher.confluence.get.return_value = MOCK_SPACES_RESPONSE
    return confluence_fetcher


class TestSpacesMixin:
    """Tests for the SpacesMixin class."""

    def test_get_spaces(self, spaces_fetcher):
        """Test listing spaces with filters."""
        result = spaces_fetcher.get_spaces(
            space_keys=["DEV", "~jdoe"],
            space_type="global",
            status="current",
            label="team",
            favourite=True,
            paging=PagingInformation(limit=2, start=0),
        )

        spaces_fetcher.confluence.get.assert_called_once_with(
            "rest/api/space",
            params={
                "spaceKey": ["DEV", "~jdoe"],
                "type": "global",
                "status": "current",
                "label": "team",
                "favourite": "true",
                "expand": "description.plain,homepage",
                "start": 0,
                "limit": 2,
            },
            absolute=False,
        )
        assert isinstance(result, ConfluenceResult)
        assert [space.key for space in result.results] == ["DEV", "~jdoe"]
        assert result.results[0].description == "Engineering space"
        assert result.has_next

    def test_get_spaces_without_filters(self, spaces_fetcher):
        spaces_fetcher.config.expand_space = []

        spaces_fetcher.get_spaces()

        spaces_fetcher.confluence.get.assert_called_once_with(
            "rest/api/space", params={}, absolute=False
        )

    def test_get_spaces_next_page(self, spaces_fetcher):
        """Following a result page uses the stored next link."""
        first = spaces_fetcher.get_spaces()
        spaces_fetcher.confluence.get.reset_mock()

        spaces_fetcher.get_spaces(paging=first.paging(PageSource.NEXT))

        spaces_fetcher.confluence.get.assert_called_once_with(
            "https://example.atlassian.net/wiki/rest/api/space?limit=2&start=2",
            params=None,
            absolute=True,
        )

    def test_get_spaces_missing_prev_page(self, spaces_fetcher):
        first = spaces_fetcher.get_spaces()
        spaces_fetcher.confluence.get.reset_mock()

        with pytest.raises(InvalidArgumentError, match="prev"):
            spaces_fetcher.get_spaces(paging=first.paging(PageSource.PREV))
        spaces_fetcher.confluence.get.assert_not_called()

    def test_get_spaces_auth_error(self, spaces_fetcher):
        spaces_fetcher.confluence.get.side_effect = HTTPError(
            response=MagicMock(status_code=403)
        )
        with pytest.raises(ConfluenceAuthenticationError):
            spaces_fetcher.get_spaces()

    def test_get_space(self, confluence_fetcher):
        confluence_fetcher.confluence.get_space.return_value = MOCK_SPACES_RESPONSE[
            "results"
        ][0]

        space = confluence_fetcher.get_space("DEV")

        confluence_fetcher.confluence.get_space.assert_called_once_with(
            "DEV", expand="description.plain,homepage"
        )
        assert space.key == "DEV"
        assert space.links.base == "https://example.atlassian.net/wiki"

    def test_get_space_requires_key(self, confluence_fetcher):
        with pytest.raises(InvalidArgumentError):
            confluence_fetcher.get_space("")

    def test_get_space_contents(self, confluence_fetcher):
        confluence_fetcher.confluence.get.side_effect = None
        confluence_fetcher.confluence.get.return_value = MOCK_SPACE_CONTENTS_RESPONSE

        contents = confluence_fetcher.get_space_contents("DEV")

        confluence_fetcher.confluence.get.assert_called_once_with(
            "rest/api/space/DEV/content", params={"expand": "space,version"}
        )
        assert set(contents) == {"page", "blogpost"}
        assert contents["page"].results[0].title == "Release Notes"
        assert len(contents["blogpost"]) == 0

    def test_create_space(self, confluence_fetcher):
        confluence_fetcher.confluence.post.return_value = {
            "id": 1,
            "key": "NEW",
            "name": "New space",
        }

        space = confluence_fetcher.create_space("NEW", "New space", "About")

        confluence_fetcher.confluence.post.assert_called_once_with(
            "rest/api/space",
            data={
                "key": "NEW",
                "name": "New space",
                "description": {"plain": {"value": "About", "representation": "plain"}},
            },
        )
        assert space.key == "NEW"
        assert space.id == "1"

    def test_create_private_space(self, confluence_fetcher):
        confluence_fetcher.confluence.post.return_value = {"key": "ME", "name": "Mine"}

        confluence_fetcher.create_private_space("ME", "Mine")

        confluence_fetcher.confluence.post.assert_called_once_with(
            "rest/api/space/_private", data={"key": "ME", "name": "Mine"}
        )

    def test_create_space_requires_key_and_name(self, confluence_fetcher):
        with pytest.raises(InvalidArgumentError):
            confluence_fetcher.create_space("", "Name")
        with pytest.raises(InvalidArgumentError):
            confluence_fetcher.create_private_space("KEY", "")

    def test_update_space(self, confluence_fetcher):
        confluence_fetcher.confluence.put.return_value = {
            "key": "DEV",
            "name": "Renamed",
        }

        space = confluence_fetcher.update_space(
            ConfluenceSpace(key="DEV", name="Renamed")
        )

        confluence_fetcher.confluence.put.assert_called_once_with(
            "rest/api/space/DEV", data={"key": "DEV", "name": "Renamed"}
        )
        assert space.name == "Renamed"

    def test_update_space_requires_key(self, confluence_fetcher):
        with pytest.raises(InvalidArgumentError):
            confluence_fetcher.update_space(ConfluenceSpace(name="No key"))

    def test_delete_space(self, confluence_fetcher):
        confluence_fetcher.confluence.delete.return_value = {
            "id": "task-1",
            "links": {"status": "/rest/api/longtask/task-1"},
        }

        task = confluence_fetcher.delete_space("DEV")

        confluence_fetcher.confluence.delete.assert_called_once_with(
            "rest/api/space/DEV"
        )
        assert task["id"] == "task-1"

    def test_delete_space_empty_response(self, confluence_fetcher):
        confluence_fetcher.confluence.delete.return_value = None
        assert confluence_fetcher.delete_space("DEV") == {}
