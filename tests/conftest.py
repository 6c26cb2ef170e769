"""Shared fixtures for the MCP Confluence test suite."""

from unittest.mock import MagicMock, Mock

import pytest
import requests
from requests.exceptions import HTTPError

from mcp_confluence.confluence import ConfluenceFetcher
from mcp_confluence.confluence.config import ConfluenceConfig

CONFLUENCE_ENV_VARS = (
    "CONFLUENCE_URL",
    "CONFLUENCE_USERNAME",
    "CONFLUENCE_API_TOKEN",
    "CONFLUENCE_SPACE_KEY",
    "CONFLUENCE_SPACE_ID",
    "CONFLUENCE_SSL_VERIFY",
    "CONFLUENCE_TIMEOUT",
    "JIRA_DOMAIN",
    "JIRA_EMAIL",
    "JIRA_API",
    "READ_ONLY_MODE",
)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every Confluence related variable from the environment."""
    for name in CONFLUENCE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def confluence_config():
    """A configuration pointing at a fake cloud site."""
    return ConfluenceConfig(
        url="https://example.atlassian.net",
        username="user@example.com",
        api_token="secret-api-token",
        space_key="SD",
        space_id="65877",
        timeout=30.0,
    )


@pytest.fixture
def mock_session():
    """A requests session double."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def confluence_fetcher(confluence_config, mock_session):
    """A real ConfluenceFetcher whose HTTP session is mocked."""
    fetcher = ConfluenceFetcher(config=confluence_config)
    fetcher.session = mock_session
    return fetcher


def make_response(payload=None, status_code=200, text=""):
    """Build a successful or failing ``requests.Response`` double."""
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.text = text
    response.json.return_value = payload if payload is not None else {}
    if status_code >= 400:
        response.raise_for_status.side_effect = HTTPError(
            f"{status_code} Client Error for url: https://example.atlassian.net",
            response=response,
        )
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def api_response():
    return make_response
