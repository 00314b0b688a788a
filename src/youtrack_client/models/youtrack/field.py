"""
YouTrack issue field models.

A field is a named value attached to an issue. Field values come in a few
shapes (scalar, list of strings, list of assignees, opaque structured JSON);
the shape is described by FieldValueKind and computed from the stored value,
so a value reassigned in place is always classified correctly.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel

from .common import Assignee


class JsonShape(Enum):
    """Shape of a decoded JSON value."""

    NULL = "null"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"


_SIMPLE_SHAPES = frozenset({JsonShape.STRING, JsonShape.NUMBER, JsonShape.BOOLEAN})


def json_shape(value: Any) -> JsonShape:
    """
    Classify a decoded JSON value.

    Args:
        value: A value as produced by ``json.loads``

    Returns:
        The JsonShape of the value. Anything that is not a JSON primitive or
        array is reported as OBJECT.
    """
    if value is None:
        return JsonShape.NULL
    # bool is a subclass of int
    if isinstance(value, bool):
        return JsonShape.BOOLEAN
    if isinstance(value, int | float):
        return JsonShape.NUMBER
    if isinstance(value, str):
        return JsonShape.STRING
    if isinstance(value, list | tuple):
        return JsonShape.ARRAY
    return JsonShape.OBJECT


def is_simple_shape(shape: JsonShape) -> bool:
    """Return True for string, number and boolean shapes."""
    return shape in _SIMPLE_SHAPES


def simple_value_to_str(value: Any) -> str:
    """Render a simple JSON value the way it is written in JSON."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class FieldValueKind(Enum):
    """Discriminator for the value stored in a Field."""

    EMPTY = "empty"
    SCALAR = "scalar"
    STRING_LIST = "string_list"
    ASSIGNEE_LIST = "assignee_list"
    STRUCTURED = "structured"


def classify_value(value: Any) -> FieldValueKind:
    """
    Classify a stored field value.

    Args:
        value: The value held by a Field

    Returns:
        The FieldValueKind of the value
    """
    if value is None:
        return FieldValueKind.EMPTY
    if isinstance(value, list | tuple):
        if all(isinstance(item, str) for item in value):
            return FieldValueKind.STRING_LIST
        if all(isinstance(item, Assignee) for item in value):
            return FieldValueKind.ASSIGNEE_LIST
        return FieldValueKind.STRUCTURED
    if isinstance(value, dict):
        return FieldValueKind.STRUCTURED
    return FieldValueKind.SCALAR


class Field(BaseModel):
    """
    Model representing one named field of a YouTrack issue.

    Only the issue owning the field guarantees name uniqueness; the field
    itself is a plain name/value pair whose value may be replaced in place.
    """

    name: str
    value: Any = None

    @property
    def kind(self) -> FieldValueKind:
        """The shape of the current value."""
        return classify_value(self.value)

    def value_as_str(self) -> str | None:
        """Best-effort string rendering of the value, None when empty."""
        if self.value is None:
            return None
        return str(self.value)

    def to_api_dict(self) -> dict[str, Any]:
        """Render the field as a ``{"name": ..., "value": ...}`` descriptor."""
        return {"name": self.name, "value": _to_jsonable(self.value)}


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_none=True)
    if isinstance(value, list | tuple):
        return [_to_jsonable(item) for item in value]
    return value
