"""
Pydantic models for Confluence API responses.

This package provides type-safe models for working with Confluence data,
including conversion methods from API responses to structured models and
simplified dictionaries.
"""

from .base import ApiModel, TimestampMixin
from .confluence import (
    ConfluenceAttachment,
    ConfluenceLabel,
    ConfluenceLinks,
    ConfluencePage,
    ConfluenceResult,
    ConfluenceSearchResult,
    ConfluenceSpace,
    ConfluenceUser,
    ConfluenceVersion,
    PageSource,
    PagingInformation,
)
from .constants import (  # noqa: F401 - Keep constants available
    CONFLUENCE_DEFAULT_ID,
    CONFLUENCE_DEFAULT_SPACE,
    CONFLUENCE_DEFAULT_VERSION,
    EMPTY_STRING,
    UNASSIGNED,
    UNKNOWN,
)

__all__ = [
    # Base models
    "ApiModel",
    "TimestampMixin",
    # Confluence models
    "ConfluenceUser",
    "ConfluenceAttachment",
    "ConfluenceLabel",
    "ConfluenceLinks",
    "ConfluenceSpace",
    "ConfluenceVersion",
    "ConfluencePage",
    "ConfluenceResult",
    "ConfluenceSearchResult",
    "PageSource",
    "PagingInformation",
]
