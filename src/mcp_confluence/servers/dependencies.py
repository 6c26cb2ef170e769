"""Dependency providers for tool functions.

Tools receive the FastMCP ``Context``; the helpers here pull the application
context created by the server lifespan out of it.
"""

from __future__ import annotations

import logging

from fastmcp import Context

from mcp_confluence.confluence import ConfluenceFetcher
from mcp_confluence.servers.context import MainAppContext

logger = logging.getLogger("mcp-confluence.servers.dependencies")


def get_app_context(ctx: Context) -> MainAppContext | None:
    """Return the ``MainAppContext`` yielded by the lifespan, if any."""
    lifespan_ctx_dict = ctx.request_context.lifespan_context
    app_lifespan_ctx = (
        lifespan_ctx_dict.get("app_lifespan_context")
        if isinstance(lifespan_ctx_dict, dict)
        else None
    )
    if not isinstance(app_lifespan_ctx, MainAppContext):
        logger.warning("Lifespan context not available for this request.")
        return None
    return app_lifespan_ctx


async def get_confluence_fetcher(ctx: Context) -> ConfluenceFetcher:
    """Returns the shared ConfluenceFetcher created at server start-up.

    Raises:
        ValueError: If Confluence was not configured when the server started.
    """
    app_lifespan_ctx = get_app_context(ctx)
    if app_lifespan_ctx is None or app_lifespan_ctx.confluence is None:
        raise ValueError(
            "Confluence is not configured. Please provide CONFLUENCE_URL, "
            "CONFLUENCE_USERNAME and CONFLUENCE_API_TOKEN."
        )
    return app_lifespan_ctx.confluence


def ensure_write_access(ctx: Context, action: str) -> None:
    """Refuse a write action while the server runs in read-only mode.

    Args:
        ctx: The FastMCP context.
        action: Human readable action, e.g. ``"create page"``.

    Raises:
        ValueError: If read-only mode is enabled.
    """
    app_lifespan_ctx = get_app_context(ctx)
    if app_lifespan_ctx is not None and app_lifespan_ctx.read_only:
        logger.warning(f"Attempted to {action} in read-only mode.")
        raise ValueError(f"Cannot {action} in read-only mode.")
