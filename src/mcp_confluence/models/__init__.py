"""
Pydantic models for the MCP Confluence integration.
"""

from .base import ApiModel
from .confluence import PageBody, PageCreateRequest, PageUpdateRequest, PageVersion

__all__ = [
    "ApiModel",
    "PageBody",
    "PageCreateRequest",
    "PageUpdateRequest",
    "PageVersion",
]
