"""Unit tests for the ConfluenceClient base class."""

import pytest
import requests
from requests.exceptions import HTTPError

from mcp_confluence.confluence.client import ConfluenceClient
from mcp_confluence.exceptions import MCPConfluenceAuthenticationError


class TestConfluenceClient:
    """Tests for session setup and response handling."""

    def test_session_uses_basic_auth_and_json_headers(self, confluence_config):
        client = ConfluenceClient(config=confluence_config)

        assert client.session.auth == ("user@example.com", "secret-api-token")
        assert client.session.headers["Accept"] == "application/json"
        assert client.session.headers["Content-Type"] == "application/json"
        assert client.session.verify is True

    def test_loads_config_from_env_when_not_given(self, clean_env):
        clean_env.setenv("CONFLUENCE_URL", "https://env.atlassian.net/wiki")
        clean_env.setenv("CONFLUENCE_USERNAME", "env@example.com")
        clean_env.setenv("CONFLUENCE_API_TOKEN", "env-token")

        client = ConfluenceClient()

        assert client.config.url == "https://env.atlassian.net"
        assert client.config.api_base_url == "https://env.atlassian.net/wiki/api/v2"

    def test_get_builds_v2_url(self, confluence_fetcher, mock_session, api_response):
        mock_session.get.return_value = api_response({"id": "1"})

        result = confluence_fetcher._get("/pages/1", params={"body-format": "storage"})

        assert result == {"id": "1"}
        mock_session.get.assert_called_once_with(
            "https://example.atlassian.net/wiki/api/v2/pages/1",
            params={"body-format": "storage"},
            timeout=30.0,
        )

    def test_http_error_propagates(self, confluence_fetcher, mock_session, api_response):
        mock_session.get.return_value = api_response(
            status_code=404, text='{"errors":[{"title":"Not Found"}]}'
        )

        with pytest.raises(HTTPError, match="404"):
            confluence_fetcher._get("pages/404")

    @pytest.mark.parametrize("status_code", [401, 403])
    def test_auth_errors_are_translated(
        self, confluence_fetcher, mock_session, api_response, status_code
    ):
        mock_session.post.return_value = api_response(status_code=status_code)

        with pytest.raises(MCPConfluenceAuthenticationError) as excinfo:
            confluence_fetcher._post("pages", {"title": "x"})

        assert f"({status_code})" in str(excinfo.value)
        assert isinstance(excinfo.value.__cause__, HTTPError)

    def test_network_error_propagates(self, confluence_fetcher, mock_session):
        mock_session.put.side_effect = requests.ConnectionError("Connection refused")

        with pytest.raises(requests.ConnectionError, match="Connection refused"):
            confluence_fetcher._put("pages/1", {"id": "1"})

    def test_no_content_response(self, confluence_fetcher, mock_session, api_response):
        mock_session.put.return_value = api_response(status_code=204)

        assert confluence_fetcher._put("pages/1", {"id": "1"}) == {}
