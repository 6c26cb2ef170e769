"""
Confluence page request models.
"""

from typing import Literal

from pydantic import Field

from ..base import ApiModel


class PageBody(ApiModel):
    """
    Page body in a given representation (``storage``, ``atlas_doc_format``...).
    """

    representation: str
    value: str


class PageVersion(ApiModel):
    """
    Version block of an update; the number must be the current one plus one.
    """

    number: int = Field(ge=1)


class PageCreateRequest(ApiModel):
    """
    Body of ``POST /pages``.
    """

    space_id: str = Field(alias="spaceId")
    status: Literal["current", "draft"] = "current"
    title: str
    body: PageBody


class PageUpdateRequest(ApiModel):
    """
    Body of ``PUT /pages/{id}``.

    The PUT replaces the page, so ``title`` and ``body`` are only sent when the
    caller supplied them.
    """

    id: str
    status: Literal["current", "draft"] = "current"
    version: PageVersion
    title: str | None = None
    body: PageBody | None = None
