"""Main FastMCP server setup for the Confluence integration."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Literal

from fastmcp import FastMCP

from mcp_confluence.confluence import ConfluenceFetcher
from mcp_confluence.confluence.config import ConfluenceConfig
from mcp_confluence.utils.io import is_read_only_mode
from mcp_confluence.utils.logging import log_config_param

from .confluence import confluence_mcp
from .context import MainAppContext

logger = logging.getLogger("mcp-confluence.server.main")


def _log_confluence_config(config: ConfluenceConfig) -> None:
    log_config_param(logger, "Confluence", "URL", config.url)
    log_config_param(logger, "Confluence", "Username", config.username)
    log_config_param(logger, "Confluence", "API Token", config.api_token, sensitive=True)
    log_config_param(logger, "Confluence", "Space Key", config.space_key)
    log_config_param(logger, "Confluence", "Space ID", config.space_id)
    log_config_param(logger, "Confluence", "SSL Verify", str(config.ssl_verify))
    log_config_param(
        logger,
        "Confluence",
        "Timeout",
        f"{config.timeout}s" if config.timeout else "none",
    )


@asynccontextmanager
async def main_lifespan(app: FastMCP) -> AsyncIterator[dict]:
    """Build the shared Confluence client once for the lifetime of the server."""
    logger.info("Confluence MCP Server starting...")
    read_only = is_read_only_mode()

    loaded_config: ConfluenceConfig | None = None
    confluence: ConfluenceFetcher | None = None
    try:
        loaded_config = ConfluenceConfig.from_env()
        _log_confluence_config(loaded_config)
        confluence = ConfluenceFetcher(config=loaded_config)
        logger.info("Confluence client initialized successfully.")
    except ValueError as e:
        logger.error(f"Failed to load Confluence configuration: {e}")

    app_context = MainAppContext(
        confluence_config=loaded_config,
        confluence=confluence,
        read_only=read_only,
    )
    logger.info(f"Read-only mode: {'ENABLED' if read_only else 'DISABLED'}")

    try:
        yield {"app_lifespan_context": app_context}
    finally:
        if confluence is not None:
            confluence.session.close()
        logger.info("Confluence MCP Server shut down.")


main_mcp = FastMCP(
    name="Confluence MCP Server",
    instructions="MCP server for interacting with Confluence API",
    lifespan=main_lifespan,
)
main_mcp.mount(confluence_mcp)


async def run_server(
    transport: Literal["stdio", "sse", "streamable-http"] = "stdio",
    port: int = 8000,
    host: str = "127.0.0.1",
) -> None:
    """Run the MCP server with the specified transport.

    Args:
        transport: ``stdio`` (default), ``sse`` or ``streamable-http``.
        port: Port for the HTTP based transports.
        host: Host for the HTTP based transports.
    """
    if transport == "stdio":
        await main_mcp.run_async(transport="stdio")
    else:
        await main_mcp.run_async(transport=transport, host=host, port=port)
