"""
Common YouTrack entity models.

This module provides Pydantic models for the small records attached to an
issue: assignees and tag-like sub values.
"""

import logging
from typing import Any

from pydantic import Field

from ..base import ApiModel
from ..constants import UNASSIGNED

logger = logging.getLogger(__name__)


class Assignee(ApiModel):
    """
    Model representing a person assigned to a YouTrack issue.

    On the wire an assignee is ``{"value": "<login>", "fullName": "<name>"}``.
    The login is required; validating an entry without it raises
    ``pydantic.ValidationError``.
    """

    user_name: str = Field(alias="value")
    full_name: str | None = Field(default=None, alias="fullName")

    @property
    def display_name(self) -> str:
        """Full name when known, otherwise the login."""
        return self.full_name or self.user_name or UNASSIGNED

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "Assignee":
        """
        Create an Assignee from a YouTrack API response.

        Args:
            data: The assignee entry from a field value array

        Returns:
            An Assignee instance

        Raises:
            pydantic.ValidationError: If the entry is not a valid assignee
        """
        return cls.model_validate(data)

    def to_api_dict(self) -> dict[str, Any]:
        """Render the assignee with its wire keys."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        return {
            "user_name": self.user_name,
            "display_name": self.display_name,
        }


class SubValue(ApiModel):
    """
    Model representing a small value/style pair, used for issue tags.
    """

    value: str | None = None
    css_class: str | None = Field(default=None, alias="cssClass")

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "SubValue":
        """
        Create a SubValue from a YouTrack API response.

        Args:
            data: The tag data from the YouTrack API

        Returns:
            A SubValue instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        value = data.get("value")
        return cls(
            value=str(value) if value is not None else None,
            css_class=data.get("cssClass"),
        )

    def to_api_dict(self) -> dict[str, Any]:
        """Render the sub value with its wire keys."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        result: dict[str, Any] = {"value": self.value}
        if self.css_class:
            result["css_class"] = self.css_class
        return result
