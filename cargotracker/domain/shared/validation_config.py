"""
Centralized validation configuration for the cargo domain.

Single source of truth for the constraints value objects check at
construction time.
"""

import re
from re import Pattern

# Field Length Constraints
FIELD_LENGTHS = {
    "location": {"min": 2, "max": 50},
    "voyage_number": {"min": 1, "max": 20},
}

# Pattern Validation Rules
VALIDATION_PATTERNS: dict[str, Pattern[str]] = {
    "location": re.compile(r"^[A-Za-z0-9][A-Za-z0-9 ._-]*$"),
    "voyage_number": re.compile(r"^[A-Z0-9_-]+$"),
}

# Error Message Templates
ERROR_MESSAGES = {
    "required_field": "{field_name} is required",
    "invalid_type": "{field_name} must be a {expected}",
    "invalid_length": "{field_name} must be between {min_length} and {max_length} characters",
    "invalid_format": "{field_name} has invalid format",
    "same_locations": "{first} and {second} must differ",
    "date_not_future": "{field_name} must be in the future",
    "invalid_date_range": "{second} must not be before {first}",
    "invalid_identifier": "{field_name} is not a well-formed UUID",
    "derived_field": "{field_name} is derived from the {source} and cannot be given",
}


def get_error_message(template_key: str, **kwargs: object) -> str:
    """Render an error message template."""
    return ERROR_MESSAGES[template_key].format(**kwargs)
