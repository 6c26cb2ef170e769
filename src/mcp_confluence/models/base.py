"""
Base model for request payloads sent to the Confluence API.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ApiModel(BaseModel):
    """
    Base model for Confluence API payloads.

    Field names are snake_case in Python and serialised under their camelCase
    alias; unset optional fields are left out of the payload entirely.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_api_payload(self) -> dict[str, Any]:
        """Serialise the model into the JSON body expected by the API."""
        return self.model_dump(by_alias=True, exclude_none=True)
