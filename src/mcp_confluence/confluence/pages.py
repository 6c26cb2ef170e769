"""Module for Confluence page operations."""

import logging
from typing import Any
from urllib.parse import quote

from ..models.confluence import (
    PageBody,
    PageCreateRequest,
    PageUpdateRequest,
    PageVersion,
)
from .client import ConfluenceClient
from .constants import (
    CREATE_BODY_REPRESENTATION,
    DEFAULT_RESULT_LIMIT,
    PAGE_STATUS_CURRENT,
    READ_BODY_FORMAT,
    UPDATE_BODY_REPRESENTATION,
)

logger = logging.getLogger("mcp-confluence.pages")


def _page_path(page_id: str) -> str:
    return f"pages/{quote(page_id, safe='')}"


class PagesMixin(ConfluenceClient):
    """Mixin for Confluence page operations."""

    def get_page(self, page_id: str) -> dict[str, Any]:
        """
        Get metadata and storage-format body of a page.

        Two requests are made: the plain page resource, then the same resource
        with ``body-format=storage``.

        Args:
            page_id: The ID of the page to retrieve

        Returns:
            ``{"pageInfo": <metadata>, "pageContent": <page with body>}``
        """
        page_info = self._get(_page_path(page_id))
        page_content = self._get(
            _page_path(page_id), params={"body-format": READ_BODY_FORMAT}
        )
        return {"pageInfo": page_info, "pageContent": page_content}

    def get_page_version(self, page_id: str) -> int:
        """
        Get the current version number of a page.

        Args:
            page_id: The ID of the page

        Returns:
            The current version number

        Raises:
            ValueError: If the response carries no version number
        """
        page = self._get(_page_path(page_id))
        version_number = (page.get("version") or {}).get("number")
        if version_number is None:
            raise ValueError(f"No version number found for page '{page_id}'")
        return int(version_number)

    def create_page(
        self, title: str, body: str, space_id: str | None = None
    ) -> dict[str, Any]:
        """
        Create a new page from storage-format markup.

        Args:
            title: The title of the page
            body: The content in Confluence storage format
            space_id: Destination space ID, defaults to the configured one

        Returns:
            The created page as returned by the API
        """
        request = PageCreateRequest(
            space_id=space_id or self.config.space_id,
            status=PAGE_STATUS_CURRENT,
            title=title,
            body=PageBody(representation=CREATE_BODY_REPRESENTATION, value=body),
        )
        payload = request.to_api_payload()
        logger.debug(f"Page Data: {payload}")
        page = self._post("pages", payload)
        logger.info(f"Created page '{title}' with ID {page.get('id')}")
        return page

    def update_page(
        self,
        page_id: str,
        title: str | None = None,
        body: str | None = None,
    ) -> dict[str, Any]:
        """
        Replace a page, bumping its version.

        The current version is read right before the write and the request
        carries that number plus one. ``title`` and ``body`` are only sent when
        non-empty; with neither, the PUT still creates a new version.

        Args:
            page_id: The ID of the page to update
            title: The new title of the page
            body: The new content, in Atlassian document format

        Returns:
            The API response of the PUT
        """
        current_version = self.get_page_version(page_id)

        if not title and not body:
            logger.warning(
                f"Updating page {page_id} without title or content; only the version is bumped"
            )

        request = PageUpdateRequest(
            id=page_id,
            status=PAGE_STATUS_CURRENT,
            version=PageVersion(number=current_version + 1),
            title=title or None,
            body=(
                PageBody(representation=UPDATE_BODY_REPRESENTATION, value=body)
                if body
                else None
            ),
        )
        result = self._put(_page_path(page_id), request.to_api_payload())
        logger.info(f"Updated page {page_id} to version {current_version + 1}")
        return result

    def get_space_pages(
        self, space_key: str, limit: int = DEFAULT_RESULT_LIMIT
    ) -> list[dict[str, Any]]:
        """
        List the pages of a space.

        Args:
            space_key: The key of the space
            limit: Maximum number of pages to return

        Returns:
            The ``results`` array of the listing, unmodified
        """
        response = self._get("pages", params={"spaceKey": space_key, "limit": limit})
        return response.get("results", [])
