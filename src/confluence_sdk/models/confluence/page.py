"""
Confluence content models.
This module provides Pydantic models for pages, blog posts and their versions.
"""

import logging
from typing import Any

from pydantic import Field

from ..base import ApiModel, TimestampMixin
from ..constants import CONFLUENCE_DEFAULT_ID, EMPTY_STRING
from .common import ConfluenceAttachment, ConfluenceUser
from .label import ConfluenceLabel
from .links import ConfluenceLinks
from .space import ConfluenceSpace

logger = logging.getLogger(__name__)


class ConfluenceVersion(ApiModel, TimestampMixin):
    """
    Model representing a Confluence content version.
    """

    number: int = 0
    when: str = EMPTY_STRING
    message: str | None = None
    by: ConfluenceUser | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "ConfluenceVersion":
        """
        Create a ConfluenceVersion from a Confluence API response.

        Args:
            data: The version data from the Confluence API

        Returns:
            A ConfluenceVersion instance
        """
        if not data:
            return cls()

        by_user = None
        if by_data := data.get("by"):
            by_user = ConfluenceUser.from_api_response(by_data)

        return cls(
            number=data.get("number", 0),
            when=data.get("when", EMPTY_STRING),
            message=data.get("message"),
            by=by_user,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        result = {"number": self.number, "when": self.format_timestamp(self.when)}

        if self.message:
            result["message"] = self.message

        if self.by:
            result["by"] = self.by.display_name

        return result


class ConfluencePage(ApiModel, TimestampMixin):
    """
    Model representing a piece of Confluence content (page, blog post, ...).
    """

    id: str = CONFLUENCE_DEFAULT_ID
    title: str = EMPTY_STRING
    type: str = "page"  # "page", "blogpost", "comment", "attachment"
    status: str = "current"
    space: ConfluenceSpace | None = None
    created: str = EMPTY_STRING
    updated: str = EMPTY_STRING
    author: ConfluenceUser | None = None
    version: ConfluenceVersion | None = None
    ancestors: list[dict[str, Any]] = Field(default_factory=list)
    labels: list[ConfluenceLabel] = Field(default_factory=list)
    attachments: list[ConfluenceAttachment] = Field(default_factory=list)
    container_id: str | None = None
    links: ConfluenceLinks | None = None
    excerpt: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "ConfluencePage":
        """
        Create a ConfluencePage from a Confluence API response.

        Args:
            data: The content data from the Confluence API
            **kwargs: Additional keyword arguments
                base_url: Fallback base for the content links
                excerpt: Search excerpt to attach to the page

        Returns:
            A ConfluencePage instance
        """
        if not data:
            return cls()

        space_data = data.get("space", {})
        if not space_data:
            # Search results only reference the space through _expandable
            if expandable := data.get("_expandable", {}):
                if space_path := expandable.get("space"):
                    if space_path.startswith("/rest/api/space/"):
                        space_key = space_path.split("/rest/api/space/")[1]
                        space_data = {"key": space_key, "name": f"Space {space_key}"}

        space = ConfluenceSpace.from_api_response(space_data) if space_data else None

        author = None
        version = None
        if version_data := data.get("version"):
            version = ConfluenceVersion.from_api_response(version_data)

        created = EMPTY_STRING
        updated = EMPTY_STRING
        if history := data.get("history"):
            created = history.get("createdDate", EMPTY_STRING)
            updated = history.get("lastUpdated", {}).get("when", EMPTY_STRING)
            if author_data := history.get("createdBy"):
                author = ConfluenceUser.from_api_response(author_data)

        # Fall back to version date if no history is available
        if not updated and version and version.when:
            updated = version.when

        labels = [
            ConfluenceLabel.from_api_response(label)
            for label in data.get("metadata", {}).get("labels", {}).get("results", [])
        ]

        attachments = [
            ConfluenceAttachment.from_api_response(attachment, **kwargs)
            for attachment in data.get("children", {})
            .get("attachment", {})
            .get("results", [])
        ]

        container = data.get("container") or {}

        return cls(
            id=str(data.get("id", CONFLUENCE_DEFAULT_ID)),
            title=data.get("title", EMPTY_STRING),
            type=data.get("type", "page"),
            status=data.get("status", "current"),
            space=space,
            created=created,
            updated=updated,
            author=author,
            version=version,
            ancestors=data.get("ancestors", []),
            labels=labels,
            attachments=attachments,
            container_id=str(container["id"]) if "id" in container else None,
            links=ConfluenceLinks.from_api_response(
                data.get("_links", {}), base_url=kwargs.get("base_url")
            ),
            excerpt=kwargs.get("excerpt"),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        result = {
            "id": self.id,
            "title": self.title,
            "type": self.type,
            "created": self.format_timestamp(self.created),
            "updated": self.format_timestamp(self.updated),
        }

        if self.space:
            result["space"] = {"key": self.space.key, "name": self.space.name}

        if self.author:
            result["author"] = self.author.display_name

        if self.version:
            result["version"] = self.version.number

        if self.labels:
            result["labels"] = [label.name for label in self.labels]

        if self.excerpt:
            result["excerpt"] = self.excerpt

        if self.ancestors:
            result["ancestors"] = [
                {"id": a.get("id"), "title": a.get("title")}
                for a in self.ancestors
                if "id" in a
            ]

        return result
