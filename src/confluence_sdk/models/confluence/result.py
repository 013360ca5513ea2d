"""
Paged result containers.
Confluence list endpoints wrap their entities in ``{"results": [...], "_links": {...}}``.
"""

import logging
from typing import Any, Generic, TypeVar

from pydantic import Field

from ..base import ApiModel
from .links import ConfluenceLinks
from .paging import PageSource, PagingInformation

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT", bound=ApiModel)


class PagedResultMixin:
    """Navigation helpers for models with a ``links`` field."""

    @property
    def has_next(self) -> bool:
        return bool(self.links and self.links.next)

    @property
    def has_prev(self) -> bool:
        return bool(self.links and self.links.prev)

    def paging(
        self, page_source: PageSource = PageSource.NEXT, limit: int | None = None
    ) -> PagingInformation:
        """Create the paging information needed to fetch a neighbouring page."""
        return PagingInformation(limit=limit, links=self.links, page_source=page_source)


class ConfluenceResult(ApiModel, PagedResultMixin, Generic[ResultT]):
    """
    Model representing one page of a Confluence list endpoint.
    """

    results: list[ResultT] = Field(default_factory=list)
    start: int | None = None
    limit: int | None = None
    size: int = 0
    links: ConfluenceLinks | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "ConfluenceResult":
        """
        Create a ConfluenceResult from a Confluence API response.

        Args:
            data: The paged response from the Confluence API
            **kwargs: Additional context parameters, including:
                - item_model: ApiModel subclass used to parse each result (required)
                - base_url: Fallback base for links

        Returns:
            A ConfluenceResult instance
        """
        item_model: type[ApiModel] = kwargs.pop("item_model")
        if not data:
            return cls()

        results = [
            item_model.from_api_response(item, **kwargs)
            for item in data.get("results", [])
        ]

        return cls(
            results=results,
            start=data.get("start"),
            limit=data.get("limit"),
            size=data.get("size", len(results)),
            links=ConfluenceLinks.from_api_response(
                data.get("_links", {}), base_url=kwargs.get("base_url")
            ),
        )

    def __len__(self) -> int:
        return len(self.results)

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        return {
            "size": self.size,
            "has_next": self.has_next,
            "results": [item.to_simplified_dict() for item in self.results],
        }
