"""Tests for the command line entry point."""

import os
from unittest.mock import AsyncMock, patch

from click.testing import CliRunner

from mcp_confluence import main


def _invoke(args):
    runner = CliRunner()
    with (
        patch.dict(os.environ, {}, clear=False),
        patch("mcp_confluence.load_dotenv") as mock_load_dotenv,
        patch("mcp_confluence.servers.run_server", new_callable=AsyncMock) as mock_run,
    ):
        result = runner.invoke(main, args)
        env = dict(os.environ)
    return result, mock_run, mock_load_dotenv, env


def test_defaults_to_stdio():
    result, mock_run, mock_load_dotenv, _ = _invoke([])

    assert result.exit_code == 0, result.output
    mock_run.assert_awaited_once_with(transport="stdio", port=8000, host="127.0.0.1")
    mock_load_dotenv.assert_called_once_with()


def test_options_are_exported_to_environment():
    result, _, _, env = _invoke(
        [
            "--confluence-url",
            "https://acme.atlassian.net",
            "--confluence-username",
            "me@acme.com",
            "--confluence-token",
            "token",
            "--space-key",
            "ENG",
            "--space-id",
            "4242",
            "--timeout",
            "10",
            "--read-only",
            "--no-confluence-ssl-verify",
        ]
    )

    assert result.exit_code == 0, result.output
    assert env["CONFLUENCE_URL"] == "https://acme.atlassian.net"
    assert env["CONFLUENCE_USERNAME"] == "me@acme.com"
    assert env["CONFLUENCE_API_TOKEN"] == "token"
    assert env["CONFLUENCE_SPACE_KEY"] == "ENG"
    assert env["CONFLUENCE_SPACE_ID"] == "4242"
    assert env["CONFLUENCE_TIMEOUT"] == "10.0"
    assert env["READ_ONLY_MODE"] == "true"
    assert env["CONFLUENCE_SSL_VERIFY"] == "false"


def test_http_transport_options():
    result, mock_run, _, _ = _invoke(["--transport", "sse", "--port", "9000"])

    assert result.exit_code == 0, result.output
    mock_run.assert_awaited_once_with(transport="sse", port=9000, host="127.0.0.1")


def test_env_file_is_loaded(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("CONFLUENCE_URL=https://from-file.atlassian.net\n")

    result, _, mock_load_dotenv, _ = _invoke(["--env-file", str(env_file)])

    assert result.exit_code == 0, result.output
    mock_load_dotenv.assert_called_once_with(str(env_file))


def test_rejects_unknown_transport():
    result, mock_run, _, _ = _invoke(["--transport", "carrier-pigeon"])

    assert result.exit_code != 0
    mock_run.assert_not_awaited()
