"""
Validators shared by the cargo value objects.

Each check returns ``None`` when the value is acceptable, otherwise a message
describing the first violated constraint; the caller decides which domain
error to raise.
"""

from datetime import datetime, timezone

from .validation_config import FIELD_LENGTHS, VALIDATION_PATTERNS, get_error_message


def check_code(kind: str, field_name: str, value: object) -> str | None:
    """Check a short textual code (location, voyage number) against its constraints."""
    if value is None:
        return get_error_message("required_field", field_name=field_name)
    if not isinstance(value, str):
        return get_error_message("invalid_type", field_name=field_name, expected="string")

    limits = FIELD_LENGTHS[kind]
    if not limits["min"] <= len(value) <= limits["max"]:
        return get_error_message(
            "invalid_length",
            field_name=field_name,
            min_length=limits["min"],
            max_length=limits["max"],
        )
    if not VALIDATION_PATTERNS[kind].match(value):
        return get_error_message("invalid_format", field_name=field_name)
    return None


def check_location_code(field_name: str, value: object) -> str | None:
    return check_code("location", field_name, value)


def as_utc(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
