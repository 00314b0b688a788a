"""
Base models for the YouTrack client.

Every API model extends ApiModel so it can be built from a raw response and
rendered back to a simplified dictionary.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """
    Base model for YouTrack API responses.

    Subclasses implement from_api_response to translate the wire format
    (camelCase keys, optional sections) into model attributes.
    """

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        """
        Create a model instance from an API response.

        Args:
            data: The raw response data
            **kwargs: Additional context for the conversion

        Returns:
            An instance of the model
        """
        raise NotImplementedError("Subclasses must implement from_api_response")

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to a simplified dictionary for output."""
        return self.model_dump(exclude_none=True)
