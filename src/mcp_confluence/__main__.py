"""Entry point for running the MCP Confluence server."""

from mcp_confluence import main

if __name__ == "__main__":
    main()
