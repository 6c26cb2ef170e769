"""Confluence API integration module.

This module provides access to Confluence content through the Model Context Protocol.
"""

from .client import ConfluenceClient
from .config import ConfluenceConfig
from .pages import PagesMixin
from .search import SearchMixin


class ConfluenceFetcher(SearchMixin, PagesMixin):
    """Main entry point for Confluence operations.

    Combines the search and page mixins over one authenticated client.
    """


__all__ = ["ConfluenceFetcher", "ConfluenceConfig", "ConfluenceClient"]
