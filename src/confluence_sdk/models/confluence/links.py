"""
Confluence link models.
This module provides the Pydantic model for the ``_links`` section that
Confluence attaches to entities and paged results.
"""

import logging
from typing import Any

from ..base import ApiModel

logger = logging.getLogger(__name__)


class ConfluenceLinks(ApiModel):
    """
    Model representing the ``_links`` of an entity or result page.

    ``self_link`` is absolute; ``next``, ``prev``, ``webui``, ``tinyui`` and
    ``download`` are relative to ``base``.
    """

    base: str | None = None
    self_link: str | None = None
    next: str | None = None
    prev: str | None = None
    collection: str | None = None
    context: str | None = None
    download: str | None = None
    webui: str | None = None
    tinyui: str | None = None
    status: str | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "ConfluenceLinks":
        """
        Create a ConfluenceLinks from the ``_links`` section of a response.

        Args:
            data: The ``_links`` data from the Confluence API
            **kwargs: Additional context parameters, including:
                - base_url: Used as ``base`` when the response has none

        Returns:
            A ConfluenceLinks instance
        """
        if not data:
            return cls(base=kwargs.get("base_url"))

        return cls(
            base=data.get("base", kwargs.get("base_url")),
            self_link=data.get("self"),
            next=data.get("next"),
            prev=data.get("prev"),
            collection=data.get("collection"),
            context=data.get("context"),
            download=data.get("download"),
            webui=data.get("webui"),
            tinyui=data.get("tinyui"),
            status=data.get("status"),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        result = self.model_dump(exclude_none=True)
        if "self_link" in result:
            result["self"] = result.pop("self_link")
        return result
