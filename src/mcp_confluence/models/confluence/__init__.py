"""
Confluence data models for the MCP Confluence integration.

Key models:
- PageCreateRequest: body of POST /pages
- PageUpdateRequest: body of PUT /pages/{id}
"""

from .page import PageBody, PageCreateRequest, PageUpdateRequest, PageVersion

__all__ = [
    "PageBody",
    "PageCreateRequest",
    "PageUpdateRequest",
    "PageVersion",
]
