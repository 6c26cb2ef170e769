"""FastMCP servers exposing the Confluence tools."""

from .main import main_mcp, run_server

__all__ = ["main_mcp", "run_server"]
