"""Module for Confluence search operations."""

import logging
from typing import Any

from .client import ConfluenceClient
from .constants import DEFAULT_RESULT_LIMIT
from .utils import build_space_text_cql

logger = logging.getLogger("mcp-confluence.search")


class SearchMixin(ConfluenceClient):
    """Mixin for Confluence search operations."""

    def search(
        self, query: str, limit: int = DEFAULT_RESULT_LIMIT
    ) -> list[dict[str, Any]]:
        """
        Search the configured space for pages matching free text.

        Args:
            query: Text to search for
            limit: Maximum number of results to return

        Returns:
            The ``results`` array of the search response, unmodified
        """
        cql = build_space_text_cql(self.config.space_key, query)
        logger.debug(f"Searching Confluence with CQL: {cql} (limit={limit})")
        response = self._get("search", params={"cql": cql, "limit": limit})
        return response.get("results", [])
