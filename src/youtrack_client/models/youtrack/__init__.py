"""
YouTrack data models.

This package provides Pydantic models for YouTrack issue data: the issue
record with its dynamic field bag, and the comment, tag and assignee records
attached to it.
"""

from .comment import Comment
from .common import Assignee, SubValue
from .field import (
    Field,
    FieldValueKind,
    JsonShape,
    classify_value,
    is_simple_shape,
    json_shape,
)
from .issue import Issue

__all__ = [
    "Assignee",
    "Comment",
    "Field",
    "FieldValueKind",
    "Issue",
    "JsonShape",
    "SubValue",
    "classify_value",
    "is_simple_shape",
    "json_shape",
]
