"""Tracking identifier value object."""

from __future__ import annotations

from typing import Any
from uuid import UUID, uuid4

from pydantic import Field, field_validator

from ...shared.base import ValueObject
from ...shared.exceptions import InvalidIdentifierError
from ...shared.validation_config import get_error_message


class TrackingId(ValueObject):
    """
    Uniquely identifies a cargo.

    Wraps a UUID; the canonical string form is the lowercase hyphenated
    representation, so identifiers parsed from differently formatted text
    still compare equal.
    """

    value: UUID = Field(None, validate_default=True)

    @field_validator("value", mode="before")
    @classmethod
    def parse_identifier(cls, v: Any) -> UUID:
        if isinstance(v, UUID):
            return v
        if isinstance(v, str):
            try:
                return UUID(v.strip())
            except ValueError:
                pass
        raise InvalidIdentifierError(
            "tracking_id",
            v,
            get_error_message("invalid_identifier", field_name="tracking_id"),
        )

    @classmethod
    def from_string(cls, value: str) -> TrackingId:
        return cls(value=value)

    @classmethod
    def generate(cls) -> TrackingId:
        """Create a fresh random tracking id."""
        return cls(value=uuid4())

    def to_string(self) -> str:
        return str(self.value)

    def same_value_as(self, other: Any) -> bool:
        if not isinstance(other, TrackingId):
            return False
        return self.to_string() == other.to_string()

    def __str__(self) -> str:
        return self.to_string()
