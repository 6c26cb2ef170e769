class MCPConfluenceError(Exception):
    """Base exception for MCP-Confluence errors."""

    pass


class MCPConfluenceAuthenticationError(MCPConfluenceError):
    """Raised when Confluence API authentication fails (401/403)."""

    pass
