"""Confluence REST API client.

The client runs queries built with :mod:`confluence_sdk.query` and maps the
responses onto :mod:`confluence_sdk.models`.
"""

from .attachments import AttachmentsMixin
from .client import ConfluenceClient
from .config import ConfluenceConfig
from .search import SearchMixin
from .spaces import SpacesMixin
from .users import UsersMixin


class ConfluenceFetcher(SearchMixin, SpacesMixin, AttachmentsMixin, UsersMixin):
    """Main entry point for Confluence operations, combining all mixins."""

    pass


__all__ = ["ConfluenceFetcher", "ConfluenceConfig", "ConfluenceClient"]
