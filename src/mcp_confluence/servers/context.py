from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mcp_confluence.confluence import ConfluenceFetcher
    from mcp_confluence.confluence.config import ConfluenceConfig


@dataclass(frozen=True)
class MainAppContext:
    """Context holding the shared Confluence client and server settings."""

    confluence_config: ConfluenceConfig | None = None
    confluence: ConfluenceFetcher | None = None
    read_only: bool = False
