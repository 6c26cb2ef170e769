"""Configuration module for the Confluence client."""

import os
from dataclasses import dataclass

from ..utils import (
    getenv_with_fallback,
    is_atlassian_cloud_url,
    is_env_ssl_verify,
    normalize_site_url,
)
from .constants import DEFAULT_SPACE_ID, DEFAULT_SPACE_KEY, DEFAULT_TIMEOUT


@dataclass(frozen=True)
class ConfluenceConfig:
    """Confluence API configuration.

    Built once at start-up and shared read-only by every tool call.
    """

    url: str  # Site domain, without the /wiki prefix
    username: str  # Account email
    api_token: str  # API token used as password
    space_key: str = DEFAULT_SPACE_KEY  # Space searched by search_pages
    space_id: str = DEFAULT_SPACE_ID  # Destination space of create_page
    ssl_verify: bool = True
    timeout: float | None = DEFAULT_TIMEOUT  # Seconds; None waits forever

    def __post_init__(self) -> None:
        object.__setattr__(self, "url", normalize_site_url(self.url))

    @property
    def is_cloud(self) -> bool:
        """Check if this is a cloud instance.

        Returns:
            True if this is a cloud instance (atlassian.net), False otherwise.
        """
        return is_atlassian_cloud_url(self.url)

    @property
    def wiki_url(self) -> str:
        """Root of the wiki application, ``<domain>/wiki``."""
        return f"{self.url}/wiki"

    @property
    def api_base_url(self) -> str:
        """Base URL of the REST API v2, ``<domain>/wiki/api/v2``."""
        return f"{self.wiki_url}/api/v2"

    def page_web_url(self, page_id: str) -> str:
        """Browser URL of a page, ``<domain>/wiki/pages/<id>``."""
        return f"{self.wiki_url}/pages/{page_id}"

    @classmethod
    def from_env(cls) -> "ConfluenceConfig":
        """Create configuration from environment variables.

        ``CONFLUENCE_URL``, ``CONFLUENCE_USERNAME`` and ``CONFLUENCE_API_TOKEN``
        fall back to ``JIRA_DOMAIN``, ``JIRA_EMAIL`` and ``JIRA_API``.

        Returns:
            ConfluenceConfig with values from environment variables

        Raises:
            ValueError: If any required environment variable is missing or
                CONFLUENCE_TIMEOUT is not a number
        """
        url = getenv_with_fallback("CONFLUENCE_URL", "JIRA_DOMAIN")
        if not url:
            error_msg = "Missing required CONFLUENCE_URL environment variable"
            raise ValueError(error_msg)

        username = getenv_with_fallback("CONFLUENCE_USERNAME", "JIRA_EMAIL")
        api_token = getenv_with_fallback("CONFLUENCE_API_TOKEN", "JIRA_API")
        if not (username and api_token):
            msg = "Confluence authentication requires CONFLUENCE_USERNAME and CONFLUENCE_API_TOKEN"
            raise ValueError(msg)

        return cls(
            url=url,
            username=username,
            api_token=api_token,
            space_key=os.getenv("CONFLUENCE_SPACE_KEY") or DEFAULT_SPACE_KEY,
            space_id=os.getenv("CONFLUENCE_SPACE_ID") or DEFAULT_SPACE_ID,
            ssl_verify=is_env_ssl_verify("CONFLUENCE_SSL_VERIFY"),
            timeout=cls._parse_timeout(os.getenv("CONFLUENCE_TIMEOUT")),
        )

    @staticmethod
    def _parse_timeout(value: str | None) -> float | None:
        if value is None or not value.strip():
            return DEFAULT_TIMEOUT
        if value.strip().lower() in ("0", "none", "off"):
            return None
        try:
            timeout = float(value)
        except ValueError as e:
            raise ValueError(
                f"CONFLUENCE_TIMEOUT must be a number of seconds, got '{value}'"
            ) from e
        return timeout if timeout > 0 else None
