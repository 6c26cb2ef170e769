"""Confluence FastMCP server instance and tool definitions.

Every tool answers with a single text item. Failures are rendered as
``Error <action>: <message>`` inside a normal result, so callers tell success
from failure by the text, never by an exception.
"""

import asyncio
import json
import logging
from typing import Annotated

from fastmcp import Context, FastMCP
from pydantic import Field

from mcp_confluence.confluence.constants import (
    DEFAULT_RESULT_LIMIT,
    MAX_RESULT_LIMIT,
    MIN_RESULT_LIMIT,
    STORAGE_FORMAT_EXAMPLE,
)
from mcp_confluence.logging_config import log_operation
from mcp_confluence.servers.dependencies import (
    ensure_write_access,
    get_confluence_fetcher,
)

logger = logging.getLogger("mcp-confluence.servers.confluence")

confluence_mcp = FastMCP(
    name="Confluence MCP Service",
    instructions="Provides tools for interacting with the Confluence API.",
)


def _to_json(data: object) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


@confluence_mcp.tool(
    tags={"confluence", "read"},
    annotations={"title": "Get Page", "readOnlyHint": True},
)
async def get_page(
    ctx: Context,
    pageId: Annotated[  # noqa: N803
        str,
        Field(description="The ID of the page to retrieve", min_length=1),
    ],
) -> str:
    """Get a Confluence page: its metadata and its body in storage format.

    Args:
        ctx: The FastMCP context.
        pageId: The ID of the page.

    Returns:
        JSON string ``{"pageInfo": ..., "pageContent": ...}``, or an error message.
    """
    try:
        with log_operation(logger, "get_page", page_id=pageId):
            confluence = await get_confluence_fetcher(ctx)
            result = await asyncio.to_thread(confluence.get_page, pageId)
    except Exception as e:
        return f"Error fetching page: {e}"
    return _to_json(result)


@confluence_mcp.tool(
    tags={"confluence", "write"},
    annotations={"title": "Create Page", "destructiveHint": False},
)
async def create_page(
    ctx: Context,
    title: Annotated[str, Field(description="The title of the new page")],
    content: Annotated[
        str,
        Field(
            description=(
                "The content in Confluence Storage Format. Example template:\n"
                f"{STORAGE_FORMAT_EXAMPLE}"
            )
        ),
    ],
) -> str:
    """Create a new page in the configured Confluence space.

    Args:
        ctx: The FastMCP context.
        title: The title of the page.
        content: The body in Confluence storage format.

    Returns:
        Confirmation with the new page ID and its web URL, or an error message.
    """
    try:
        with log_operation(logger, "create_page", title=title):
            ensure_write_access(ctx, "create page")
            confluence = await get_confluence_fetcher(ctx)
            page = await asyncio.to_thread(confluence.create_page, title, content)
            page_id = page.get("id")
            web_url = confluence.config.page_web_url(str(page_id))
    except Exception as e:
        return f"Error creating page: {e}"
    return f"Page created successfully. ID: {page_id}\nThe web URL is {web_url}"


@confluence_mcp.tool(
    tags={"confluence", "write"},
    annotations={"title": "Update Page", "destructiveHint": True},
)
async def update_page(
    ctx: Context,
    pageId: Annotated[  # noqa: N803
        str,
        Field(description="The ID of the page to update", min_length=1),
    ],
    title: Annotated[
        str | None,
        Field(description="(Optional) The new title of the page"),
    ] = None,
    content: Annotated[
        str | None,
        Field(
            description="(Optional) The new content of the page in Atlassian document format",
        ),
    ] = None,
) -> str:
    """Update an existing page; the page version is always incremented.

    Args:
        ctx: The FastMCP context.
        pageId: The ID of the page.
        title: New title, left unchanged when omitted.
        content: New body, left unchanged when omitted.

    Returns:
        Confirmation naming the page, or an error message.
    """
    try:
        with log_operation(logger, "update_page", page_id=pageId):
            ensure_write_access(ctx, "update page")
            confluence = await get_confluence_fetcher(ctx)
            await asyncio.to_thread(
                confluence.update_page, pageId, title=title, body=content
            )
    except Exception as e:
        return f"Error updating page: {e}"
    return f"Page {pageId} updated successfully"


@confluence_mcp.tool(
    tags={"confluence", "read"},
    annotations={"title": "Search Pages", "readOnlyHint": True},
)
async def search_pages(
    ctx: Context,
    query: Annotated[str, Field(description="The text to search for")],
    limit: Annotated[
        int,
        Field(
            description="Maximum number of results to return",
            ge=MIN_RESULT_LIMIT,
            le=MAX_RESULT_LIMIT,
        ),
    ] = DEFAULT_RESULT_LIMIT,
) -> str:
    """Search the configured Confluence space for pages containing some text.

    Args:
        ctx: The FastMCP context.
        query: Free text matched with CQL ``text ~``.
        limit: Maximum number of results.

    Returns:
        JSON array of search results, or an error message.
    """
    try:
        with log_operation(logger, "search_pages", limit=limit):
            confluence = await get_confluence_fetcher(ctx)
            results = await asyncio.to_thread(confluence.search, query, limit=limit)
    except Exception as e:
        return f"Error searching pages: {e}"
    return _to_json(results)


@confluence_mcp.tool(
    tags={"confluence", "read"},
    annotations={"title": "Get Pages", "readOnlyHint": True},
)
async def get_pages(
    ctx: Context,
    spaceKey: Annotated[  # noqa: N803
        str,
        Field(description="The key of the space to retrieve pages from"),
    ],
    limit: Annotated[
        int,
        Field(
            description="Maximum number of results to return",
            ge=MIN_RESULT_LIMIT,
            le=MAX_RESULT_LIMIT,
        ),
    ] = DEFAULT_RESULT_LIMIT,
) -> str:
    """List the pages of a Confluence space.

    Args:
        ctx: The FastMCP context.
        spaceKey: The key of the space.
        limit: Maximum number of pages.

    Returns:
        JSON array of pages, or an error message.
    """
    try:
        with log_operation(logger, "get_pages", space_key=spaceKey, limit=limit):
            confluence = await get_confluence_fetcher(ctx)
            pages = await asyncio.to_thread(
                confluence.get_space_pages, spaceKey, limit=limit
            )
    except Exception as e:
        return f"Error retrieving pages: {e}"
    return _to_json(pages)
