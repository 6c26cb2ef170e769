"""I/O utility functions for MCP Confluence."""

import os


def is_read_only_mode() -> bool:
    """Check if the server is running in read-only mode.

    Read-only mode prevents the write tools (create, update) from reaching
    Confluence while allowing all read operations. This is useful when the
    server is pointed at a production site.

    Returns:
        True if read-only mode is enabled, False otherwise
    """
    value = os.getenv("READ_ONLY_MODE", "false")
    return value.lower() in {"true", "1", "yes", "y", "on"}
