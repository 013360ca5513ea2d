"""Module for Confluence search operations."""

import logging
import re
from collections.abc import Iterator

from requests.exceptions import HTTPError

from ..exceptions import InvalidArgumentError
from ..models.confluence import (
    ConfluencePage,
    ConfluenceSearchResult,
    PageSource,
    PagingInformation,
)
from ..query import Clause, ClauseBuilder, CQLField, and_, where
from .client import ConfluenceClient

logger = logging.getLogger("confluence-sdk")

SPACE_CONDITION = re.compile(r"(^|[\s(])space\s*(=|!=|in\b|not in\b)")
QUOTED_LITERAL = re.compile(r'"(?:[^"\\]|\\.)*"' + r"|'(?:[^'\\]|\\.)*'")


def _constrains_space(cql: Clause | str) -> bool:
    if isinstance(cql, Clause):
        return cql.constrains(CQLField.SPACE)
    # literals such as text ~ "space = x" are not conditions
    return bool(SPACE_CONDITION.search(QUOTED_LITERAL.sub('""', cql)))


def _parse_spaces_filter(spaces_filter: str) -> list[str]:
    spaces = [s.strip() for s in spaces_filter.split(",") if s.strip()]
    if not spaces:
        raise InvalidArgumentError(
            f"Spaces filter {spaces_filter!r} does not name any space key"
        )
    return spaces


class SearchMixin(ConfluenceClient):
    """Mixin for Confluence search operations."""

    def _apply_spaces_filter(
        self, cql: Clause | str, spaces_filter: str | None
    ) -> str:
        if isinstance(cql, ClauseBuilder):
            raise TypeError(
                f"Cannot search with an unfinished clause: {cql!r}"
            )
        if isinstance(cql, str):
            if not cql.strip():
                raise InvalidArgumentError("A CQL query is required")
        elif not isinstance(cql, Clause):
            raise TypeError(f"Expected a Clause or str, got {type(cql).__name__}")

        filter_to_use = spaces_filter or self.config.spaces_filter
        if not filter_to_use:
            return str(cql)

        spaces = _parse_spaces_filter(filter_to_use)
        cql_text = str(cql)
        if _constrains_space(cql):
            logger.debug("Query already filters by space, skipping spaces filter")
            return cql_text

        query = cql if isinstance(cql, Clause) else Clause(f"({cql_text})")
        filtered = str(and_(query, where.space.in_(spaces)))
        logger.info(f"Applied spaces filter to query: {filtered}")
        return filtered

    def search(
        self,
        cql: Clause | str,
        limit: int = 25,
        start: int = 0,
        expand: list[str] | None = None,
        spaces_filter: str | None = None,
    ) -> ConfluenceSearchResult:
        """
        Search content using Confluence Query Language (CQL).

        Args:
            cql: A finished clause from ``where`` or a raw CQL string
            limit: Maximum number of results to return
            start: Offset of the first result
            expand: Fields to expand, defaults to the configured expand_search
            spaces_filter: Optional comma-separated list of space keys, overrides config

        Returns:
            ConfluenceSearchResult with the first page of results

        Raises:
            TypeError: If cql is an unfinished clause builder
            InvalidArgumentError: If the query or expand list is empty
            ConfluenceAuthenticationError: If authentication fails (401/403)
        """
        cql_text = self._apply_spaces_filter(cql, spaces_filter)
        expand_value = self._expand(
            expand if expand is not None else (self.config.expand_search or None)
        )

        try:
            results = self.confluence.cql(
                cql=cql_text, start=start, limit=limit, expand=expand_value
            )
        except HTTPError as http_err:
            self._raise_http_error(http_err, "searching")

        return ConfluenceSearchResult.from_api_response(
            results, base_url=self.config.url, cql_query=cql_text
        )

    def get_search_page(self, paging: PagingInformation) -> ConfluenceSearchResult:
        """
        Fetch a neighbouring page of a previous search.

        Args:
            paging: Paging information, usually from ``ConfluenceSearchResult.paging()``

        Returns:
            ConfluenceSearchResult for the requested page

        Raises:
            InvalidArgumentError: If the requested page link does not exist
        """
        uri = paging.get_uri_from_links()
        logger.debug(f"Fetching search page {paging.page_source.name}: {uri}")
        try:
            results = self.confluence.get(uri, absolute=True)
        except HTTPError as http_err:
            self._raise_http_error(http_err, "fetching a search page")

        return ConfluenceSearchResult.from_api_response(
            results, base_url=self.config.url
        )

    def search_all(
        self, cql: Clause | str, limit: int = 25, max_results: int | None = None
    ) -> Iterator[ConfluencePage]:
        """
        Iterate over all search results, following the ``next`` links.

        Args:
            cql: A finished clause from ``where`` or a raw CQL string
            limit: Page size used for each request
            max_results: Stop after this many results

        Yields:
            ConfluencePage for every result
        """
        result = self.search(cql, limit=limit)
        count = 0
        while True:
            for page in result.results:
                if max_results is not None and count >= max_results:
                    return
                count += 1
                yield page
            if max_results is not None and count >= max_results:
                return
            if not result.has_next:
                return
            result = self.get_search_page(result.paging(PageSource.NEXT))
