"""
YouTrack comment models.

This module provides Pydantic models for YouTrack issue comments.
"""

import logging
from typing import Any

from pydantic import Field

from ..base import ApiModel
from ..constants import EMPTY_STRING, YOUTRACK_DEFAULT_ID

logger = logging.getLogger(__name__)


class Comment(ApiModel):
    """
    Model representing a YouTrack issue comment.
    """

    id: str = YOUTRACK_DEFAULT_ID
    author: str = EMPTY_STRING
    author_full_name: str | None = Field(default=None, alias="authorFullName")
    issue_id: str | None = Field(default=None, alias="issueId")
    parent_id: str | None = Field(default=None, alias="parentId")
    text: str = EMPTY_STRING
    created: int | None = None
    updated: int | None = None
    deleted: bool = False
    jira_id: str | None = Field(default=None, alias="jiraId")
    permitted_group: str | None = Field(default=None, alias="permittedGroup")

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "Comment":
        """
        Create a Comment from a YouTrack API response.

        Args:
            data: The comment data from the YouTrack API

        Returns:
            A Comment instance
        """
        if not data:
            return cls()

        # Handle non-dictionary data by returning a default instance
        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        comment_id = data.get("id", YOUTRACK_DEFAULT_ID)
        if comment_id is not None:
            comment_id = str(comment_id)

        return cls(
            id=comment_id,
            author=str(data.get("author") or EMPTY_STRING),
            author_full_name=data.get("authorFullName"),
            issue_id=data.get("issueId"),
            parent_id=data.get("parentId"),
            text=str(data.get("text") or EMPTY_STRING),
            created=_to_millis(data.get("created")),
            updated=_to_millis(data.get("updated")),
            deleted=bool(data.get("deleted", False)),
            jira_id=data.get("jiraId"),
            permitted_group=data.get("permittedGroup"),
        )

    def to_api_dict(self) -> dict[str, Any]:
        """Render the comment with its wire keys."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        result: dict[str, Any] = {
            "id": self.id,
            "text": self.text,
            "author": self.author_full_name or self.author,
        }

        if self.created is not None:
            result["created"] = self.created

        if self.updated is not None:
            result["updated"] = self.updated

        return result


def _to_millis(value: Any) -> int | None:
    """Timestamps arrive as epoch milliseconds, sometimes as strings."""
    if value is None or value == EMPTY_STRING:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.debug(f"Ignoring unparseable comment timestamp: {value!r}")
        return None
