"""Configuration module for the Confluence client."""

import logging
import os
from dataclasses import dataclass, field
from typing import Literal

from ..utils.logging import log_config_param
from ..utils.urls import is_atlassian_cloud_url

logger = logging.getLogger("confluence-sdk.config")

DEFAULT_EXPAND_SPACE = ["description.plain", "homepage"]
DEFAULT_EXPAND_SPACE_CONTENTS = ["space", "version"]
DEFAULT_EXPAND_ATTACHMENTS = ["container", "version"]
DEFAULT_EXPAND_SEARCH = ["content.space", "content.version"]


def _split_env_list(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name)
    if raw is None:
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class ConfluenceConfig:
    """Confluence API configuration.

    Handles authentication for Confluence Cloud and Server/Data Center:
    - Cloud: username/API token (basic auth)
    - Server/DC: personal access token or basic auth
    """

    url: str  # Base URL for Confluence
    auth_type: Literal["basic", "token"]  # Authentication type
    username: str | None = None  # Email or username
    api_token: str | None = None  # API token used as password
    personal_token: str | None = None  # Personal access token (Server/DC)
    ssl_verify: bool = True  # Whether to verify SSL certificates
    spaces_filter: str | None = None  # Comma-separated space keys to restrict searches
    http_proxy: str | None = None
    https_proxy: str | None = None
    no_proxy: str | None = None
    expand_space: list[str] = field(default_factory=lambda: list(DEFAULT_EXPAND_SPACE))
    expand_space_contents: list[str] = field(
        default_factory=lambda: list(DEFAULT_EXPAND_SPACE_CONTENTS)
    )
    expand_attachments: list[str] = field(
        default_factory=lambda: list(DEFAULT_EXPAND_ATTACHMENTS)
    )
    expand_search: list[str] = field(
        default_factory=lambda: list(DEFAULT_EXPAND_SEARCH)
    )

    @property
    def is_cloud(self) -> bool:
        """Check if this is a cloud instance.

        Returns:
            True if this is a cloud instance (atlassian.net), False otherwise.
            Localhost URLs are always considered non-cloud (Server/Data Center).
        """
        return is_atlassian_cloud_url(self.url)

    @property
    def proxies(self) -> dict[str, str]:
        """Proxy mapping in the format expected by ``requests``."""
        proxies = {}
        if self.http_proxy:
            proxies["http"] = self.http_proxy
        if self.https_proxy:
            proxies["https"] = self.https_proxy
        # requests reads the bypass list from the same mapping
        if proxies and self.no_proxy:
            proxies["no_proxy"] = self.no_proxy
        return proxies

    @classmethod
    def from_env(cls) -> "ConfluenceConfig":
        """Create configuration from environment variables.

        Returns:
            ConfluenceConfig with values from environment variables

        Raises:
            ValueError: If any required environment variable is missing
        """
        url = os.getenv("CONFLUENCE_URL")
        if not url:
            error_msg = "Missing required CONFLUENCE_URL environment variable"
            raise ValueError(error_msg)

        username = os.getenv("CONFLUENCE_USERNAME")
        api_token = os.getenv("CONFLUENCE_API_TOKEN")
        personal_token = os.getenv("CONFLUENCE_PERSONAL_TOKEN")

        if is_atlassian_cloud_url(url):
            if username and api_token:
                auth_type = "basic"
            else:
                error_msg = "Cloud authentication requires CONFLUENCE_USERNAME and CONFLUENCE_API_TOKEN"
                raise ValueError(error_msg)
        else:  # Server/Data Center
            if personal_token:
                auth_type = "token"
            elif username and api_token:
                auth_type = "basic"
            else:
                error_msg = "Server/Data Center authentication requires CONFLUENCE_PERSONAL_TOKEN or CONFLUENCE_USERNAME and CONFLUENCE_API_TOKEN"
                raise ValueError(error_msg)

        ssl_verify_env = os.getenv("CONFLUENCE_SSL_VERIFY", "true").lower()
        ssl_verify = ssl_verify_env not in ("false", "0", "no")

        config = cls(
            url=url,
            auth_type=auth_type,
            username=username,
            api_token=api_token,
            personal_token=personal_token,
            ssl_verify=ssl_verify,
            spaces_filter=os.getenv("CONFLUENCE_SPACES_FILTER"),
            http_proxy=os.getenv("CONFLUENCE_HTTP_PROXY", os.getenv("HTTP_PROXY")),
            https_proxy=os.getenv("CONFLUENCE_HTTPS_PROXY", os.getenv("HTTPS_PROXY")),
            no_proxy=os.getenv("CONFLUENCE_NO_PROXY", os.getenv("NO_PROXY")),
            expand_space=_split_env_list(
                "CONFLUENCE_EXPAND_SPACE", DEFAULT_EXPAND_SPACE
            ),
            expand_attachments=_split_env_list(
                "CONFLUENCE_EXPAND_ATTACHMENTS", DEFAULT_EXPAND_ATTACHMENTS
            ),
        )
        config.log_summary()
        return config

    def log_summary(self) -> None:
        """Log the effective configuration with credentials masked."""
        log_config_param(logger, "URL", self.url)
        log_config_param(logger, "auth type", self.auth_type)
        log_config_param(logger, "username", self.username)
        log_config_param(logger, "API token", self.api_token, sensitive=True)
        log_config_param(
            logger, "personal token", self.personal_token, sensitive=True
        )

    def is_auth_configured(self) -> bool:
        """Check if the authentication configuration is complete.

        Returns:
            bool: True if authentication is fully configured, False otherwise.
        """
        if self.auth_type == "token":
            return bool(self.personal_token)
        elif self.auth_type == "basic":
            return bool(self.username and self.api_token)
        logger.warning(
            f"Unknown or unsupported auth_type: {self.auth_type} in ConfluenceConfig"
        )
        return False
