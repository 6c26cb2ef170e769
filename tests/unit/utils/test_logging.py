"""Tests for logging helpers."""

import io
import logging

from mcp_confluence.logging_config import get_context_str, log_operation, setup_logger
from mcp_confluence.utils.logging import log_config_param, mask_sensitive


def test_mask_sensitive():
    assert mask_sensitive(None) == "Not Provided"
    assert mask_sensitive("short") == "*****"
    assert mask_sensitive("abcdefghijkl") == "abcd****ijkl"


def test_log_config_param_masks_secrets(caplog):
    logger = logging.getLogger("test-config-param")
    with caplog.at_level(logging.INFO, logger="test-config-param"):
        log_config_param(logger, "Confluence", "API Token", "abcdefghijkl", sensitive=True)
        log_config_param(logger, "Confluence", "URL", "https://x")

    assert "Confluence API Token: abcd****ijkl" in caplog.text
    assert "Confluence URL: https://x" in caplog.text


def test_setup_logger_writes_to_stderr_not_stdout(capsys):
    logger = setup_logger(name="mcp-confluence-test", level="INFO")
    logger.info("hello stderr")

    captured = capsys.readouterr()
    assert "hello stderr" in captured.err
    assert captured.out == ""


def test_setup_logger_does_not_stack_handlers():
    setup_logger(name="mcp-confluence-test-handlers")
    logger = setup_logger(name="mcp-confluence-test-handlers")

    assert len(logger.handlers) == 1


def test_log_operation_sets_and_restores_context():
    stream = io.StringIO()
    logger = setup_logger(name="mcp-confluence-test-context", level="DEBUG")
    logger.handlers[0].setStream(stream)

    assert get_context_str() == "no-context"
    with log_operation(logger, "get_page", page_id="42", trace_id="abc123"):
        assert get_context_str() == "page_id=42,trace_id=abc123,operation=get_page"
        logger.info("inside")
    assert get_context_str() == "no-context"

    assert "[page_id=42,trace_id=abc123,operation=get_page] inside" in stream.getvalue()
