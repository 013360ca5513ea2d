"""
Paging descriptors for Confluence list and search endpoints.
"""

import logging
from dataclasses import dataclass
from enum import IntEnum

from ...exceptions import InvalidArgumentError
from ...utils.urls import concat_url, extend_query
from .links import ConfluenceLinks

logger = logging.getLogger(__name__)


class PageSource(IntEnum):
    """Which stored link a :class:`PagingInformation` resolves to."""

    INITIAL = 0
    NEXT = 1
    PREV = 2


@dataclass(frozen=True)
class PagingInformation:
    """Paging settings for a request.

    Attributes:
        limit: Page size, sent as the ``limit`` parameter when set
        start: Legacy offset, only kept for callers that still pass it
        links: Links of a previous result page
        page_source: Which of the links to follow
    """

    limit: int | None = None
    start: int | None = None
    links: ConfluenceLinks | None = None
    page_source: PageSource = PageSource.INITIAL

    def __post_init__(self) -> None:
        if self.limit is not None and self.limit <= 0:
            raise InvalidArgumentError(f"Page limit must be positive, got {self.limit}")

    def _absolute(self, link: str) -> str:
        if link.startswith(("http://", "https://")):
            return link
        base = self.links.base if self.links else None
        if not base:
            raise InvalidArgumentError(
                f"Cannot resolve relative page link '{link}' without a base link."
            )
        return concat_url(base, link)

    def get_uri_from_links(self) -> str:
        """Resolve the request URI for the selected page.

        Returns:
            The absolute URI of the page to fetch

        Raises:
            InvalidArgumentError: If the link for the requested page is missing
        """
        if self.page_source == PageSource.INITIAL:
            if not self.links or not self.links.self_link:
                raise InvalidArgumentError(
                    "Request for the initial page when there is no self link."
                )
            if self.limit is None:
                return self.links.self_link
            return extend_query(self.links.self_link, "limit", self.limit)

        if self.page_source == PageSource.NEXT:
            if self.links and self.links.next:
                return self._absolute(self.links.next)
            raise InvalidArgumentError(
                "Request for next page when there is no next page link."
            )

        if self.page_source == PageSource.PREV:
            if self.links and self.links.prev:
                return self._absolute(self.links.prev)
            raise InvalidArgumentError(
                "Request for previous page when there is no prev page link."
            )

        raise InvalidArgumentError(f"Invalid page source: {self.page_source!r}")
