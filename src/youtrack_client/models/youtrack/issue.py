"""
YouTrack issue models.

This module provides the Pydantic model for YouTrack issues. Besides a few
fixed attributes, an issue carries an open-ended bag of named fields whose
names and value shapes are only known once the server response is read.
"""

import logging
from typing import Any

from pydantic import Field as ModelField
from pydantic import PrivateAttr, model_validator

from ..base import ApiModel
from ..constants import (
    ASSIGNEE_FIELD,
    DESCRIPTION_FIELD,
    FIELD_ARRAY_KEY,
    SUMMARY_FIELD,
)
from .comment import Comment
from .common import Assignee, SubValue
from .field import (
    Field,
    FieldValueKind,
    JsonShape,
    is_simple_shape,
    json_shape,
    simple_value_to_str,
)

logger = logging.getLogger(__name__)


class Issue(ApiModel):
    """
    Model representing a YouTrack issue.

    Fields are looked up case-insensitively. ``get``/``set`` (and dynamic
    attribute access such as ``issue.Due_Date``) additionally accept
    underscores in place of spaces. A miss is never an error: reading a
    missing field returns None, exactly as for a field holding None.

    Note that any attribute name not starting with an underscore resolves
    as a field, so ``hasattr(issue, name)`` is always True and a misspelled
    method name reads as None instead of raising AttributeError. Use
    get_field() to test whether a field exists.

    Example:
        issue = Issue.from_api_response(data)
        issue.summary            # "Crash on startup"
        issue.get("due date")    # same as issue.Due_Date
        issue.Priority = ["Critical"]
    """

    id: str | None = None
    entity_id: str | None = ModelField(default=None, alias="entityId")
    jira_id: str | None = ModelField(default=None, alias="jiraId")
    comments: list[Comment] = ModelField(default_factory=list, alias="comment")
    tags: list[SubValue] = ModelField(default_factory=list, alias="tag")

    # Keyed by lower-cased field name; insertion order is the export order
    _fields: dict[str, Field] = PrivateAttr(default_factory=dict)

    @model_validator(mode="wrap")
    @classmethod
    def _load_wire_fields(cls, data: Any, handler: Any) -> "Issue":
        """Route top-level summary/description and the field array through set()."""
        issue = handler(data)
        if not isinstance(data, dict):
            return issue

        if data.get("summary") is not None:
            issue.summary = data["summary"]
        if data.get("description") is not None:
            issue.description = data["description"]

        raw_fields = data.get(FIELD_ARRAY_KEY)
        if isinstance(raw_fields, list):
            issue.set(FIELD_ARRAY_KEY, raw_fields)

        return issue

    def __copy__(self) -> "Issue":
        copied = super().__copy__()
        # The dict is copied shallowly; each Field is mutable and must not be shared
        copied._fields = {
            key: field.model_copy() for key, field in self._fields.items()
        }
        return copied

    def __getattr__(self, name: str) -> Any:
        """
        Resolve unknown attributes as issue fields.

        Args:
            name: The attribute name to access

        Returns:
            The field value, or None when no field matches
        """
        if name.startswith("_"):
            return super().__getattr__(name)
        return self.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        """Assign model attributes normally and anything else as a field."""
        if name.startswith("_") or name in type(self).model_fields:
            super().__setattr__(name, value)
        elif isinstance(getattr(type(self), name, None), property):
            object.__setattr__(self, name, value)
        else:
            self.set(name, value)

    def __str__(self) -> str:
        return f"{self.id}: {self.summary}"

    @property
    def summary(self) -> str | None:
        """Summary of the issue, stored as the "Summary" field."""
        return self._get_text(SUMMARY_FIELD)

    @summary.setter
    def summary(self, value: Any) -> None:
        self._put(SUMMARY_FIELD, value)

    @property
    def description(self) -> str | None:
        """Description of the issue, stored as the "Description" field."""
        return self._get_text(DESCRIPTION_FIELD)

    @description.setter
    def description(self, value: Any) -> None:
        self._put(DESCRIPTION_FIELD, value)

    @property
    def fields(self) -> tuple[Field, ...]:
        """All fields of the issue, in insertion order."""
        return tuple(self._fields.values())

    def get_field(self, name: str) -> Field | None:
        """
        Get a field by exact, case-insensitive name.

        No underscore/space substitution is applied here; see get().

        Args:
            name: The field name

        Returns:
            The matching Field, or None when not found
        """
        return self._fields.get(name.lower())

    def get(self, name: str) -> Any:
        """
        Get a field value by name.

        The name is matched case-insensitively, first as given and then with
        every underscore replaced by a space, so "Due_Date" finds "Due Date".

        Args:
            name: The requested field name

        Returns:
            The field value, or None when no field matches
        """
        field = self._resolve(name)
        if field is None:
            return None
        return field.value

    def set(self, name: str, value: Any) -> None:
        """
        Set a field value by name.

        Setting "field" to a list loads it as a raw field array (see
        load_fields). Any other name is resolved like get(); a matching
        field is updated in place, otherwise a new field is added under the
        name exactly as given.

        Args:
            name: The requested field name
            value: The new value
        """
        if name.lower() == FIELD_ARRAY_KEY and isinstance(value, list):
            self.load_fields(value)
            return

        field = self._resolve(name)
        if field is not None:
            field.value = value
        else:
            self._fields[name.lower()] = Field(name=name, value=value)

    def load_fields(self, raw_fields: list[Any]) -> None:
        """
        Load a raw field array as returned by the YouTrack API.

        Each element is a ``{"name": ..., "value": ...}`` descriptor. Array
        values are converted as follows:

        - "assignee" (any case): a list of Assignee records
        - arrays of strings, numbers or booleans: a list of strings
        - anything else: passed through untouched

        Later descriptors replace earlier ones with the same name.

        Args:
            raw_fields: The raw field descriptors

        Raises:
            pydantic.ValidationError: If a descriptor or an assignee entry
                is malformed
        """
        for raw_field in raw_fields:
            field = Field.model_validate(raw_field)
            if json_shape(field.value) is JsonShape.ARRAY:
                field.value = self._convert_array(field.name, field.value)
            self._fields[field.name.lower()] = field

        logger.debug(f"Loaded {len(raw_fields)} fields into issue {self.id}")

    @staticmethod
    def _convert_array(name: str, items: list[Any]) -> list[Any]:
        if name.lower() == ASSIGNEE_FIELD:
            return [Assignee.from_api_response(item) for item in items]

        if all(is_simple_shape(json_shape(item)) for item in items):
            return [simple_value_to_str(item) for item in items]

        return items

    def _resolve(self, name: str) -> Field | None:
        field = self.get_field(name)
        if field is None:
            # Fields with a space in the name are reachable with an underscore
            field = self.get_field(name.replace("_", " "))
        return field

    def _get_text(self, name: str) -> str | None:
        field = self.get_field(name)
        if field is None:
            return None
        return field.value_as_str()

    def _put(self, name: str, value: Any) -> None:
        field = self.get_field(name)
        if field is not None:
            field.value = value
        else:
            self._fields[name.lower()] = Field(name=name, value=value)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "Issue":
        """
        Create an Issue from a YouTrack API response.

        Args:
            data: The issue data from the YouTrack API

        Returns:
            An Issue instance

        Raises:
            pydantic.ValidationError: If the field array is malformed
        """
        if not data:
            return cls()

        # Handle non-dictionary data by returning a default instance
        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        comments = []
        comments_data = data.get("comment")
        if isinstance(comments_data, list):
            comments = [Comment.from_api_response(c) for c in comments_data]

        tags = []
        tags_data = data.get("tag")
        if isinstance(tags_data, list):
            tags = [SubValue.from_api_response(t) for t in tags_data]

        # Older responses carry summary/description as top-level keys; the
        # wrap validator applies them before the field array
        return cls(
            id=_optional_str(data.get("id")),
            entity_id=_optional_str(data.get("entityId")),
            jira_id=_optional_str(data.get("jiraId")),
            comments=comments,
            tags=tags,
            summary=data.get("summary"),
            description=data.get("description"),
            field=data.get(FIELD_ARRAY_KEY),
        )

    def to_api_dict(self) -> dict[str, Any]:
        """Render the issue in the wire format accepted by from_api_response."""
        result: dict[str, Any] = {}
        if self.id is not None:
            result["id"] = self.id
        if self.entity_id is not None:
            result["entityId"] = self.entity_id
        if self.jira_id is not None:
            result["jiraId"] = self.jira_id

        result[FIELD_ARRAY_KEY] = [field.to_api_dict() for field in self.fields]
        result["comment"] = [comment.to_api_dict() for comment in self.comments]
        result["tag"] = [tag.to_api_dict() for tag in self.tags]
        return result

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        result: dict[str, Any] = {
            "id": self.id,
            "summary": self.summary,
        }

        if self.entity_id:
            result["entity_id"] = self.entity_id

        if self.jira_id:
            result["jira_id"] = self.jira_id

        if self.description:
            result["description"] = self.description

        result["fields"] = {
            field.name: _simplify_value(field) for field in self.fields
        }

        if self.comments:
            result["comments"] = [c.to_simplified_dict() for c in self.comments]

        if self.tags:
            result["tags"] = [t.value for t in self.tags]

        return result


def _optional_str(value: Any) -> str | None:
    return str(value) if value is not None else None


def _simplify_value(field: Field) -> Any:
    if field.kind is FieldValueKind.ASSIGNEE_LIST:
        return [assignee.to_simplified_dict() for assignee in field.value]
    return field.to_api_dict()["value"]
