"""Module for Confluence space operations."""

import logging
from collections.abc import Iterable
from typing import Any

from requests.exceptions import HTTPError

from ..exceptions import InvalidArgumentError
from ..models.confluence import (
    ConfluencePage,
    ConfluenceResult,
    ConfluenceSpace,
    PagingInformation,
)
from .client import ConfluenceClient

logger = logging.getLogger("confluence-sdk")


class SpacesMixin(ConfluenceClient):
    """Mixin for Confluence space operations."""

    def get_spaces(
        self,
        space_keys: Iterable[str] | None = None,
        space_type: str | None = None,
        status: str | None = None,
        label: str | None = None,
        favourite: bool | None = None,
        paging: PagingInformation | None = None,
    ) -> ConfluenceResult:
        """
        Get spaces, optionally filtered.

        Args:
            space_keys: Only return spaces with these keys
            space_type: Filter by type ("global" or "personal")
            status: Filter by status ("current" or "archived")
            label: Filter by space label
            favourite: Filter by the current user's favourites
            paging: Page size, or the links of a previous page to follow

        Returns:
            ConfluenceResult of ConfluenceSpace models
        """
        if paging is not None and paging.links is not None:
            path = paging.get_uri_from_links()
            params: dict[str, Any] | None = None
            absolute = True
        else:
            path = "rest/api/space"
            absolute = False
            params = {}
            if space_keys:
                params["spaceKey"] = list(space_keys)
            if space_type:
                params["type"] = space_type
            if status:
                params["status"] = status
            if label:
                params["label"] = label
            if favourite is not None:
                params["favourite"] = str(favourite).lower()
            if expand := self._expand(self.config.expand_space or None):
                params["expand"] = expand
            if paging is not None and paging.start is not None:
                params["start"] = paging.start
            if paging is not None and paging.limit is not None:
                params["limit"] = paging.limit

        try:
            response = self.confluence.get(path, params=params, absolute=absolute)
        except HTTPError as http_err:
            self._raise_http_error(http_err, "listing spaces")

        return ConfluenceResult.from_api_response(
            response, item_model=ConfluenceSpace, base_url=self.config.url
        )

    def get_space(self, space_key: str) -> ConfluenceSpace:
        """
        Get a single space.

        Args:
            space_key: The key of the space

        Returns:
            The ConfluenceSpace
        """
        if not space_key:
            raise InvalidArgumentError("A space key is required")
        try:
            response = self.confluence.get_space(
                space_key, expand=self._expand(self.config.expand_space or None)
            )
        except HTTPError as http_err:
            self._raise_http_error(http_err, f"fetching space {space_key}")
        return ConfluenceSpace.from_api_response(response, base_url=self.config.url)

    def get_space_contents(self, space_key: str) -> dict[str, ConfluenceResult]:
        """
        Get the content of a space, grouped by content type.

        Args:
            space_key: The key of the space

        Returns:
            Mapping of content type ("page", "blogpost") to a ConfluenceResult of pages
        """
        if not space_key:
            raise InvalidArgumentError("A space key is required")
        params = {}
        if expand := self._expand(self.config.expand_space_contents or None):
            params["expand"] = expand
        try:
            response = self.confluence.get(
                f"rest/api/space/{space_key}/content", params=params
            )
        except HTTPError as http_err:
            self._raise_http_error(http_err, f"fetching contents of space {space_key}")

        return {
            content_type: ConfluenceResult.from_api_response(
                data, item_model=ConfluencePage, base_url=self.config.url
            )
            for content_type, data in (response or {}).items()
            if isinstance(data, dict) and "results" in data
        }

    def _post_space(self, path: str, space: ConfluenceSpace) -> ConfluenceSpace:
        try:
            response = self.confluence.post(path, data=space.to_api_payload())
        except HTTPError as http_err:
            self._raise_http_error(http_err, f"creating space {space.key}")
        logger.info(f"Created Confluence space {space.key}")
        return ConfluenceSpace.from_api_response(response, base_url=self.config.url)

    def create_space(
        self, key: str, name: str, description: str | None = None
    ) -> ConfluenceSpace:
        """Create a global space."""
        if not key or not name:
            raise InvalidArgumentError("Both a space key and a name are required")
        space = ConfluenceSpace(key=key, name=name, description=description)
        return self._post_space("rest/api/space", space)

    def create_private_space(
        self, key: str, name: str, description: str | None = None
    ) -> ConfluenceSpace:
        """Create a space only visible to the current user."""
        if not key or not name:
            raise InvalidArgumentError("Both a space key and a name are required")
        space = ConfluenceSpace(key=key, name=name, description=description)
        return self._post_space("rest/api/space/_private", space)

    def update_space(self, space: ConfluenceSpace) -> ConfluenceSpace:
        """Update the name and description of an existing space."""
        if not space.key:
            raise InvalidArgumentError("The space to update has no key")
        try:
            response = self.confluence.put(
                f"rest/api/space/{space.key}", data=space.to_api_payload()
            )
        except HTTPError as http_err:
            self._raise_http_error(http_err, f"updating space {space.key}")
        return ConfluenceSpace.from_api_response(response, base_url=self.config.url)

    def delete_space(self, space_key: str) -> dict[str, Any]:
        """
        Delete a space.

        Confluence deletes spaces asynchronously.

        Returns:
            The long running task description returned by Confluence
        """
        if not space_key:
            raise InvalidArgumentError("A space key is required")
        try:
            response = self.confluence.delete(f"rest/api/space/{space_key}")
        except HTTPError as http_err:
            self._raise_http_error(http_err, f"deleting space {space_key}")
        logger.info(f"Requested deletion of Confluence space {space_key}")
        return response or {}
