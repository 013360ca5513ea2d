"""
Common Confluence entity models.
This module provides Pydantic models for Confluence users and attachments.
"""

import logging
from typing import Any

from ..base import ApiModel
from ..constants import CONFLUENCE_CONTENT_ATTACHMENT, UNASSIGNED
from .links import ConfluenceLinks

logger = logging.getLogger(__name__)


class ConfluenceUser(ApiModel):
    """
    Model representing a Confluence user.

    Cloud instances identify users by ``account_id``; Server/Data Center
    instances use ``username`` or ``user_key``.
    """

    account_id: str | None = None
    username: str | None = None
    user_key: str | None = None
    display_name: str = UNASSIGNED
    email: str | None = None
    profile_picture: str | None = None
    is_active: bool = True
    locale: str | None = None

    @property
    def has_identifier(self) -> bool:
        return bool(self.account_id or self.username or self.user_key)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "ConfluenceUser":
        """
        Create a ConfluenceUser from a Confluence API response.

        Args:
            data: The user data from the Confluence API

        Returns:
            A ConfluenceUser instance
        """
        if not data:
            return cls()

        profile_pic = None
        if pic_data := data.get("profilePicture"):
            profile_pic = pic_data.get("path")

        # Server/DC responses carry no accountStatus and are active by default
        status = data.get("accountStatus", "active")

        return cls(
            account_id=data.get("accountId"),
            username=data.get("username"),
            user_key=data.get("userKey"),
            display_name=data.get("displayName", UNASSIGNED),
            email=data.get("email"),
            profile_picture=profile_pic,
            is_active=status == "active",
            locale=data.get("locale"),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        return {
            "display_name": self.display_name,
            "email": self.email,
            "profile_picture": self.profile_picture,
        }


class ConfluenceAttachment(ApiModel):
    """
    Model representing a Confluence attachment.
    """

    id: str | None = None
    type: str = CONFLUENCE_CONTENT_ATTACHMENT
    status: str | None = None
    title: str | None = None
    media_type: str | None = None
    file_size: int | None = None
    comment: str | None = None
    container_id: str | None = None
    links: ConfluenceLinks | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "ConfluenceAttachment":
        """
        Create a ConfluenceAttachment from a Confluence API response.

        Args:
            data: The attachment data from the Confluence API
            **kwargs: Additional context parameters, including:
                - base_url: Fallback base for the attachment links

        Returns:
            A ConfluenceAttachment instance
        """
        if not data:
            return cls()

        extensions = data.get("extensions", {})
        container = data.get("container") or {}

        return cls(
            id=data.get("id"),
            type=data.get("type", CONFLUENCE_CONTENT_ATTACHMENT),
            status=data.get("status"),
            title=data.get("title"),
            media_type=extensions.get("mediaType"),
            file_size=extensions.get("fileSize"),
            comment=extensions.get("comment"),
            container_id=str(container["id"]) if "id" in container else None,
            links=ConfluenceLinks.from_api_response(
                data.get("_links", {}), base_url=kwargs.get("base_url")
            ),
        )

    @property
    def is_attachment(self) -> bool:
        return self.type == CONFLUENCE_CONTENT_ATTACHMENT

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        return {
            "id": self.id,
            "type": self.type,
            "status": self.status,
            "title": self.title,
            "media_type": self.media_type,
            "file_size": self.file_size,
        }
