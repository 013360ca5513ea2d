"""
Confluence data models.
This package provides Pydantic models for Confluence API data structures,
organized by entity type.

Key models:
- ConfluencePage: Content (page, blog post, ...) and its metadata
- ConfluenceSpace: Space information
- ConfluenceUser: User account details
- ConfluenceResult: One page of a list endpoint
- ConfluenceSearchResult: Container for CQL search results
- PagingInformation: Which page of a result to request next
"""

from .common import ConfluenceAttachment, ConfluenceUser
from .label import ConfluenceLabel
from .links import ConfluenceLinks
from .page import ConfluencePage, ConfluenceVersion
from .paging import PageSource, PagingInformation
from .result import ConfluenceResult
from .search import ConfluenceSearchResult
from .space import ConfluenceSpace

__all__ = [
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
