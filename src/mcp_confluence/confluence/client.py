"""Base client module for Confluence REST API v2 interactions."""

import logging
from typing import Any

import requests
from atlassian import Confluence
from requests.exceptions import HTTPError

from ..exceptions import MCPConfluenceAuthenticationError
from .config import ConfluenceConfig

logger = logging.getLogger("mcp-confluence.client")


class ConfluenceClient:
    """Base client for Confluence API interactions.

    Authentication and the HTTP session come from ``atlassian.Confluence``;
    requests are issued against the v2 endpoints under ``<domain>/wiki/api/v2``.
    """

    def __init__(self, config: ConfluenceConfig | None = None) -> None:
        """Initialize the Confluence client with given or environment config.

        Args:
            config: Configuration for Confluence client. If None, will load from
                environment.

        Raises:
            ValueError: If configuration is invalid or environment variables are missing
        """
        self.config = config or ConfluenceConfig.from_env()

        logger.debug(
            f"Initializing Confluence client with Basic auth. URL: {self.config.wiki_url}, Username: {self.config.username}"
        )
        self.confluence = Confluence(
            url=self.config.wiki_url,
            username=self.config.username,
            password=self.config.api_token,  # API token is used as password
            cloud=self.config.is_cloud,
            verify_ssl=self.config.ssl_verify,
        )
        self.session: requests.Session = self.confluence._session
        self.session.verify = self.config.ssl_verify
        self.session.headers.update(
            {"Accept": "application/json", "Content-Type": "application/json"}
        )

    def _api_url(self, path: str) -> str:
        return f"{self.config.api_base_url}/{path.lstrip('/')}"

    def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Issue a GET against the v2 API and return the decoded JSON body."""
        url = self._api_url(path)
        logger.debug(f"GET {url} params={params}")
        response = self.session.get(url, params=params, timeout=self.config.timeout)
        return self._handle_response(response)

    def _post(self, path: str, data: dict[str, Any]) -> Any:
        """Issue a POST with a JSON body and return the decoded JSON body."""
        url = self._api_url(path)
        logger.debug(f"POST {url}")
        response = self.session.post(url, json=data, timeout=self.config.timeout)
        return self._handle_response(response)

    def _put(self, path: str, data: dict[str, Any]) -> Any:
        """Issue a PUT with a JSON body and return the decoded JSON body."""
        url = self._api_url(path)
        logger.debug(f"PUT {url}")
        response = self.session.put(url, json=data, timeout=self.config.timeout)
        return self._handle_response(response)

    def _handle_response(self, response: requests.Response) -> Any:
        """Raise for error statuses and decode the JSON payload.

        Raises:
            MCPConfluenceAuthenticationError: If the API answers 401 or 403
            HTTPError: For any other error status
        """
        try:
            response.raise_for_status()
        except HTTPError as http_err:
            error_response = http_err.response if http_err.response is not None else response
            logger.error(f"API Error: {getattr(error_response, 'text', '') or http_err}")
            status_code = getattr(error_response, "status_code", None)
            if status_code in (401, 403):
                error_msg = (
                    f"Authentication failed for Confluence API ({status_code}). "
                    "Token may be expired or invalid. Please verify credentials."
                )
                raise MCPConfluenceAuthenticationError(error_msg) from http_err
            raise

        if response.status_code == 204:
            return {}
        return response.json()
