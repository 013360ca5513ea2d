"""Module for Confluence user operations."""

import logging
from typing import Any

from requests.exceptions import HTTPError

from ..exceptions import ConfluenceAuthenticationError, InvalidArgumentError
from ..models.confluence import ConfluenceUser
from .client import ConfluenceClient

logger = logging.getLogger("confluence-sdk")


def _user_params(user: ConfluenceUser) -> dict[str, str]:
    if user.account_id:
        return {"accountId": user.account_id}
    if user.username:
        return {"username": user.username}
    if user.user_key:
        return {"key": user.user_key}
    raise InvalidArgumentError(
        f"User '{user.display_name}' has no account id, username or key"
    )


class UsersMixin(ConfluenceClient):
    """Mixin for Confluence user operations."""

    def get_current_user(self) -> ConfluenceUser:
        """
        Retrieve the currently authenticated user from '/rest/api/user/current'.

        Returns:
            ConfluenceUser for the configured credentials

        Raises:
            ConfluenceAuthenticationError: If authentication fails or the response is not valid user data.
        """
        try:
            user_data = self.confluence.get("rest/api/user/current")
        except HTTPError as http_err:
            self._raise_http_error(http_err, "fetching the current user")

        if not isinstance(user_data, dict):
            logger.error(
                f"Confluence /rest/api/user/current returned non-dict data type: {type(user_data)}. "
                f"Response text (partial): {str(user_data)[:500]}"
            )
            raise ConfluenceAuthenticationError(
                "Did not receive valid JSON user data from /rest/api/user/current."
            )
        return ConfluenceUser.from_api_response(user_data)

    def get_user(
        self,
        account_id: str | None = None,
        username: str | None = None,
        user_key: str | None = None,
    ) -> ConfluenceUser:
        """
        Get a user by exactly one of account id, username or user key.

        Raises:
            InvalidArgumentError: If not exactly one identifier is given
        """
        if sum(1 for value in (account_id, username, user_key) if value) != 1:
            raise InvalidArgumentError(
                "Exactly one of account_id, username or user_key is required"
            )
        user = ConfluenceUser(account_id=account_id, username=username, user_key=user_key)
        params = _user_params(user)
        try:
            user_data = self.confluence.get("rest/api/user", params=params)
        except HTTPError as http_err:
            self._raise_http_error(http_err, f"fetching user {params}")
        return ConfluenceUser.from_api_response(user_data)

    def get_group_memberships(self, user: ConfluenceUser) -> list[str]:
        """Names of the groups the given user belongs to."""
        params: dict[str, Any] = _user_params(user)
        try:
            response = self.confluence.get("rest/api/user/memberof", params=params)
        except HTTPError as http_err:
            self._raise_http_error(http_err, "fetching group memberships")
        return [group.get("name", "") for group in (response or {}).get("results", [])]
