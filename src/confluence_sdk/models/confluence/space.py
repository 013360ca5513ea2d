"""
Confluence space models.
This module provides Pydantic models for Confluence spaces.
"""

import logging
from typing import Any

from ..base import ApiModel
from ..constants import CONFLUENCE_DEFAULT_ID, EMPTY_STRING, UNKNOWN
from .links import ConfluenceLinks

logger = logging.getLogger(__name__)


class ConfluenceSpace(ApiModel):
    """
    Model representing a Confluence space.
    """

    id: str = CONFLUENCE_DEFAULT_ID
    key: str = EMPTY_STRING
    name: str = UNKNOWN
    description: str | None = None
    type: str = "global"  # "global", "personal"
    status: str = "current"  # "current", "archived"
    links: ConfluenceLinks | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "ConfluenceSpace":
        """
        Create a ConfluenceSpace from a Confluence API response.

        Args:
            data: The space data from the Confluence API

        Returns:
            A ConfluenceSpace instance
        """
        if not data:
            return cls()

        description = None
        if plain := data.get("description", {}).get("plain"):
            description = plain.get("value")

        links = None
        if links_data := data.get("_links"):
            links = ConfluenceLinks.from_api_response(
                links_data, base_url=kwargs.get("base_url")
            )

        return cls(
            id=str(data.get("id", CONFLUENCE_DEFAULT_ID)),
            key=data.get("key", EMPTY_STRING),
            name=data.get("name", UNKNOWN),
            description=description,
            type=data.get("type", "global"),
            status=data.get("status", "current"),
            links=links,
        )

    def to_api_payload(self) -> dict[str, Any]:
        """Build the JSON body used to create or update this space."""
        payload: dict[str, Any] = {"key": self.key, "name": self.name}
        if self.description is not None:
            payload["description"] = {
                "plain": {"value": self.description, "representation": "plain"}
            }
        return payload

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        return {
            "key": self.key,
            "name": self.name,
            "type": self.type,
            "status": self.status,
        }
