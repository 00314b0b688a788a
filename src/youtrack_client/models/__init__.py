"""
Pydantic models for the YouTrack client.

The youtrack subpackage holds the issue record model and the small records
attached to it.
"""

from .base import ApiModel
from .youtrack import (
    Assignee,
    Comment,
    Field,
    FieldValueKind,
    Issue,
    JsonShape,
    SubValue,
    classify_value,
    is_simple_shape,
    json_shape,
)

__all__ = [
    "ApiModel",
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
