"""Module for Confluence attachment operations."""

import logging
from typing import IO, Any

from requests.exceptions import HTTPError

from ..exceptions import InvalidArgumentError
from ..models.confluence import ConfluenceAttachment, ConfluenceResult
from ..models.constants import CONFLUENCE_STATUS_TRASHED
from .client import ConfluenceClient

logger = logging.getLogger("confluence-sdk")


class AttachmentsMixin(ConfluenceClient):
    """Mixin for Confluence attachment operations."""

    def get_attachments(self, content_id: int) -> ConfluenceResult:
        """
        Get the attachments of a piece of content.

        Args:
            content_id: ID of the page or blog post

        Returns:
            ConfluenceResult of ConfluenceAttachment models
        """
        params = {}
        if expand := self._expand(self.config.expand_attachments or None):
            params["expand"] = expand
        try:
            response = self.confluence.get(
                f"rest/api/content/{content_id}/child/attachment", params=params
            )
        except HTTPError as http_err:
            self._raise_http_error(
                http_err, f"fetching attachments of content {content_id}"
            )
        return ConfluenceResult.from_api_response(
            response, item_model=ConfluenceAttachment, base_url=self.config.url
        )

    def _upload(
        self,
        path: str,
        content: bytes | IO[bytes],
        filename: str,
        comment: str | None,
        content_type: str | None,
    ) -> ConfluenceResult:
        if not filename:
            raise InvalidArgumentError("A filename is required for an attachment")
        data: dict[str, Any] = {}
        if comment:
            data["comment"] = comment
        files = {"file": (filename, content, content_type or "application/octet-stream")}
        try:
            # explicit headers keep the JSON default Content-Type off the multipart body
            response = self.confluence.post(
                path,
                data=data or None,
                files=files,
                headers=self.confluence.no_check_headers,
            )
        except HTTPError as http_err:
            self._raise_http_error(http_err, f"uploading attachment {filename}")
        logger.info(f"Uploaded attachment {filename}")
        return ConfluenceResult.from_api_response(
            response, item_model=ConfluenceAttachment, base_url=self.config.url
        )

    def attach(
        self,
        content_id: int,
        content: bytes | IO[bytes],
        filename: str,
        comment: str | None = None,
        content_type: str | None = None,
    ) -> ConfluenceResult:
        """
        Add an attachment to a piece of content.

        Args:
            content_id: ID of the content to attach to
            content: The attachment data
            filename: Filename of the attachment
            comment: Optional comment stored with the attachment
            content_type: Optional MIME type of the data

        Returns:
            ConfluenceResult with the created attachment
        """
        return self._upload(
            f"rest/api/content/{content_id}/child/attachment",
            content,
            filename,
            comment,
            content_type,
        )

    def update_attachment_data(
        self,
        content_id: int,
        attachment_id: int,
        content: bytes | IO[bytes],
        filename: str,
        comment: str | None = None,
        content_type: str | None = None,
    ) -> ConfluenceResult:
        """Upload a new version of an existing attachment."""
        return self._upload(
            f"rest/api/content/{content_id}/child/attachment/{attachment_id}/data",
            content,
            filename,
            comment,
            content_type,
        )

    def delete_attachment(self, attachment_id: int, is_trashed: bool = False) -> None:
        """
        Delete an attachment.

        Attachments are moved to the trash first; call again with
        ``is_trashed=True`` to purge them.

        Args:
            attachment_id: Numeric ID of the attachment
            is_trashed: Whether the attachment is already in the trash
        """
        params = {"status": CONFLUENCE_STATUS_TRASHED} if is_trashed else None
        try:
            self.confluence.delete(
                f"rest/api/content/att{attachment_id}", params=params
            )
        except HTTPError as http_err:
            self._raise_http_error(http_err, f"deleting attachment {attachment_id}")
        logger.info(f"Deleted attachment {attachment_id}")

    def get_attachment_content(self, attachment: ConfluenceAttachment) -> bytes:
        """
        Download the data of an attachment.

        Raises:
            InvalidArgumentError: If the given content is not an attachment or has no download link
        """
        if not attachment.is_attachment:
            raise InvalidArgumentError(
                f"Not an attachment: content {attachment.id} has type {attachment.type}"
            )
        download_uri = self.create_download_uri(attachment.links)
        if not download_uri:
            raise InvalidArgumentError(
                f"Attachment {attachment.id} has no download link"
            )
        try:
            return self.confluence.get(
                download_uri, absolute=True, not_json_response=True
            )
        except HTTPError as http_err:
            self._raise_http_error(http_err, f"downloading attachment {attachment.id}")
