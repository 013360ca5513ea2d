"""
Base models for Confluence API entities.

All entity models derive from :class:`ApiModel`, which gives them a common
``from_api_response`` / ``to_simplified_dict`` interface.
"""

from datetime import datetime
from typing import Any, TypeVar

from pydantic import BaseModel

from .constants import EMPTY_STRING

# Type variable for the return type of from_api_response
T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """
    Base model for all API models with common conversion methods.
    """

    @classmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        """
        Convert an API response to a model instance.

        Args:
            data: The API response data
            **kwargs: Additional context parameters

        Returns:
            An instance of the model

        Raises:
            NotImplementedError: If the subclass does not implement this method
        """
        raise NotImplementedError("Subclasses must implement from_api_response")

    def to_simplified_dict(self) -> dict[str, Any]:
        """
        Convert the model to a simplified dictionary.

        Returns:
            A dictionary with only the fields that are set
        """
        return self.model_dump(exclude_none=True)


class TimestampMixin:
    """
    Mixin for handling Confluence timestamp formats.
    """

    @staticmethod
    def _normalize_timestamp(timestamp: str) -> str:
        # Convert Z format to +00:00 for compatibility with fromisoformat
        ts = timestamp.replace("Z", "+00:00")

        # Handle timezone format without colon (+0000 -> +00:00)
        if "+" in ts and ":" not in ts[-5:]:
            tz_pos = ts.rfind("+")
            if tz_pos != -1 and len(ts) >= tz_pos + 5:
                ts = ts[: tz_pos + 3] + ":" + ts[tz_pos + 3 :]
        elif "-" in ts and ":" not in ts[-5:]:
            tz_pos = ts.rfind("-")
            if tz_pos != -1 and len(ts) >= tz_pos + 5:
                ts = ts[: tz_pos + 3] + ":" + ts[tz_pos + 3 :]
        return ts

    @classmethod
    def format_timestamp(cls, timestamp: str | None) -> str:
        """
        Format a Confluence timestamp to a human-readable format.

        Args:
            timestamp: An ISO 8601 timestamp string, e.g. "2024-01-01T10:00:00.000+0000"

        Returns:
            A formatted date string, or the input unchanged if it cannot be parsed
        """
        if not timestamp:
            return EMPTY_STRING

        try:
            dt = datetime.fromisoformat(cls._normalize_timestamp(timestamp))
            return dt.strftime("%Y-%m-%d %H:%M:%S")
        except (ValueError, TypeError):
            return timestamp or EMPTY_STRING
