"""Base client module for Confluence API interactions."""

import logging
from typing import NoReturn

from atlassian import Confluence
from requests.exceptions import HTTPError

from ..exceptions import ConfluenceAuthenticationError, InvalidArgumentError
from ..models.confluence import ConfluenceLinks
from ..utils.ssl import configure_ssl_verification
from ..utils.urls import concat_url
from .config import ConfluenceConfig

logger = logging.getLogger("confluence-sdk")


class ConfluenceClient:
    """Base client for Confluence API interactions."""

    def __init__(self, config: ConfluenceConfig | None = None) -> None:
        """Initialize the Confluence client with given or environment config.

        Args:
            config: Configuration for Confluence client. If None, will load from
                environment.

        Raises:
            ValueError: If configuration is invalid or environment variables are missing
        """
        self.config = config or ConfluenceConfig.from_env()

        if self.config.auth_type == "token":
            self.confluence = Confluence(
                url=self.config.url,
                token=self.config.personal_token,
                cloud=self.config.is_cloud,
                verify_ssl=self.config.ssl_verify,
            )
        else:  # basic auth
            self.confluence = Confluence(
                url=self.config.url,
                username=self.config.username,
                password=self.config.api_token,  # API token is used as password
                cloud=self.config.is_cloud,
                verify_ssl=self.config.ssl_verify,
            )

        session = self.confluence._session
        configure_ssl_verification(
            url=self.config.url,
            session=session,
            ssl_verify=self.config.ssl_verify,
        )
        if proxies := self.config.proxies:
            session.proxies.update(proxies)
            logger.debug(f"Using proxies for Confluence: {sorted(proxies)}")
        # Confluence rejects form posts without this header (XSRF check)
        session.headers["X-Atlassian-Token"] = "no-check"

    def _base_for(self, links: ConfluenceLinks | None) -> str:
        if links is None:
            raise InvalidArgumentError("Links are required to build a Confluence URI")
        return links.base or self.config.url

    def create_webui_uri(self, links: ConfluenceLinks | None) -> str | None:
        """Absolute URL of the web UI page described by ``links``."""
        return concat_url(self._base_for(links), links.webui)

    def create_tinyui_uri(self, links: ConfluenceLinks | None) -> str | None:
        """Absolute short URL described by ``links``."""
        return concat_url(self._base_for(links), links.tinyui)

    def create_download_uri(self, links: ConfluenceLinks | None) -> str | None:
        """Absolute download URL of an attachment described by ``links``."""
        return concat_url(self._base_for(links), links.download)

    @staticmethod
    def _expand(expand: list[str] | None) -> str | None:
        if expand is None:
            return None
        if not expand:
            raise InvalidArgumentError(
                "An explicit expand list must name at least one field"
            )
        return ",".join(expand)

    def _raise_http_error(self, http_err: HTTPError, action: str) -> NoReturn:
        """Translate an HTTP error from the Confluence API and raise it."""
        response = http_err.response
        if response is not None and response.status_code in [401, 403]:
            error_msg = (
                f"Authentication failed for Confluence API ({response.status_code}) while {action}. "
                "Token may be expired or invalid. Please verify credentials."
            )
            logger.error(error_msg)
            raise ConfluenceAuthenticationError(error_msg) from http_err
        logger.error(f"HTTP error while {action}: {http_err}")
        raise http_err
