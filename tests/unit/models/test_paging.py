"""Tests for paging descriptors and link resolution."""

import pytest

from confluence_sdk.exceptions import InvalidArgumentError
from confluence_sdk.models.confluence import (
    ConfluenceLinks,
    PageSource,
    PagingInformation,
)


@pytest.fixture
def links():
    return ConfluenceLinks(
        base="https://h/wiki",
        self_link="https://h/wiki/rest/api/content?type=page",
        next="/rest/api/content?type=page&cursor=abc&limit=25",
        prev="/rest/api/content?type=page&cursor=xyz&limit=25",
    )


class TestInitialPage:
    """Tests for resolving the first page."""

    def test_limit_is_appended(self):
        paging = PagingInformation(
            limit=25, links=ConfluenceLinks(self_link="https://h/rest/api/content")
        )
        assert paging.get_uri_from_links() == "https://h/rest/api/content?limit=25"

    def test_limit_extends_existing_query(self, links):
        paging = PagingInformation(limit=10, links=links)
        assert paging.get_uri_from_links() == (
            "https://h/wiki/rest/api/content?type=page&limit=10"
        )

    def test_limit_replaces_existing_limit(self):
        links = ConfluenceLinks(self_link="https://h/rest/api/content?limit=5&start=0")
        paging = PagingInformation(limit=50, links=links)
        assert paging.get_uri_from_links() == (
            "https://h/rest/api/content?start=0&limit=50"
        )

    def test_no_limit_returns_self_link(self, links):
        assert PagingInformation(links=links).get_uri_from_links() == links.self_link

    def test_missing_self_link(self):
        with pytest.raises(InvalidArgumentError, match="self link"):
            PagingInformation(limit=25, links=ConfluenceLinks()).get_uri_from_links()

    def test_missing_links(self):
        with pytest.raises(InvalidArgumentError):
            PagingInformation(limit=25).get_uri_from_links()


class TestNeighbourPages:
    """Tests for following next and prev links."""

    def test_next(self, links):
        paging = PagingInformation(links=links, page_source=PageSource.NEXT)
        assert paging.get_uri_from_links() == (
            "https://h/wiki/rest/api/content?type=page&cursor=abc&limit=25"
        )

    def test_prev(self, links):
        paging = PagingInformation(links=links, page_source=PageSource.PREV)
        assert paging.get_uri_from_links() == (
            "https://h/wiki/rest/api/content?type=page&cursor=xyz&limit=25"
        )

    def test_next_ignores_limit(self, links):
        """The stored cursor link already carries the page size."""
        paging = PagingInformation(limit=5, links=links, page_source=PageSource.NEXT)
        assert "limit=25" in paging.get_uri_from_links()

    def test_absolute_link_is_kept(self):
        links = ConfluenceLinks(next="https://other/rest/api/search?cursor=1")
        paging = PagingInformation(links=links, page_source=PageSource.NEXT)
        assert paging.get_uri_from_links() == "https://other/rest/api/search?cursor=1"

    def test_next_missing(self):
        links = ConfluenceLinks(base="https://h", self_link="https://h/rest/api/content")
        paging = PagingInformation(links=links, page_source=PageSource.NEXT)
        with pytest.raises(InvalidArgumentError, match="next"):
            paging.get_uri_from_links()

    def test_prev_missing(self):
        paging = PagingInformation(links=None, page_source=PageSource.PREV)
        with pytest.raises(InvalidArgumentError, match="prev"):
            paging.get_uri_from_links()

    def test_relative_link_without_base(self):
        links = ConfluenceLinks(next="/rest/api/content?cursor=abc")
        paging = PagingInformation(links=links, page_source=PageSource.NEXT)
        with pytest.raises(InvalidArgumentError, match="base"):
            paging.get_uri_from_links()


class TestPagingInformation:
    """Tests for the paging value itself."""

    @pytest.mark.parametrize("limit", [0, -10])
    def test_non_positive_limit(self, limit):
        with pytest.raises(InvalidArgumentError):
            PagingInformation(limit=limit)

    def test_defaults(self):
        paging = PagingInformation()
        assert paging.page_source is PageSource.INITIAL
        assert paging.limit is None
        assert paging.start is None

    def test_frozen(self):
        paging = PagingInformation(limit=10)
        with pytest.raises(AttributeError):
            paging.limit = 20
