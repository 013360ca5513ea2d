"""
Confluence search result models.
This module provides Pydantic models for Confluence search (CQL) results.
"""

import logging
from typing import Any

from pydantic import Field, model_validator

from ..base import ApiModel, TimestampMixin
from .links import ConfluenceLinks
from .page import ConfluencePage
from .result import PagedResultMixin

logger = logging.getLogger(__name__)


class ConfluenceSearchResult(ApiModel, TimestampMixin, PagedResultMixin):
    """
    Model representing a Confluence search (CQL) result.
    """

    total_size: int = 0
    start: int = 0
    limit: int = 0
    size: int = 0
    results: list[ConfluencePage] = Field(default_factory=list)
    cql_query: str | None = None
    search_duration: int | None = None
    links: ConfluenceLinks | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "ConfluenceSearchResult":
        """
        Create a ConfluenceSearchResult from a Confluence API response.

        Args:
            data: The search result data from the Confluence API
            **kwargs: Additional context parameters, including:
                - base_url: Fallback base for links
                - cql_query: The query that produced this result

        Returns:
            A ConfluenceSearchResult instance
        """
        if not data:
            return cls(cql_query=kwargs.get("cql_query"))

        # In Confluence search, the content is nested inside the result item
        results = []
        for item in data.get("results", []):
            if content := item.get("content"):
                results.append(
                    ConfluencePage.from_api_response(
                        content,
                        base_url=kwargs.get("base_url"),
                        excerpt=item.get("excerpt") or None,
                    )
                )

        return cls(
            total_size=data.get("totalSize", 0),
            start=data.get("start", 0),
            limit=data.get("limit", 0),
            size=data.get("size", len(results)),
            results=results,
            cql_query=data.get("cqlQuery", kwargs.get("cql_query")),
            search_duration=data.get("searchDuration"),
            links=ConfluenceLinks.from_api_response(
                data.get("_links", {}), base_url=kwargs.get("base_url")
            ),
        )

    @model_validator(mode="after")
    def validate_search_result(self) -> "ConfluenceSearchResult":
        """Validate the search result and log warnings if needed."""
        if self.total_size > 0 and not self.results and self.size > 0:
            logger.warning(
                "Search found %d results but no content data was returned",
                self.total_size,
            )
        return self

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        return {
            "total_size": self.total_size,
            "cql_query": self.cql_query,
            "has_next": self.has_next,
            "results": [page.to_simplified_dict() for page in self.results],
        }
