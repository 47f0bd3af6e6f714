"""
Domain Exceptions

Defines custom exceptions for cargo domain errors with discriminated unions.
These exceptions represent invalid construction, business rule violations
and repository failures.

None of them derive from ``ValueError``: raised inside a pydantic validator
they propagate unchanged rather than being folded into a pydantic
``ValidationError``.
"""

from enum import Enum


class ErrorType(str, Enum):
    """Error type enumeration for discriminated unions."""

    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    NOT_FOUND = "not_found"
    REPOSITORY = "repository"
    CONCURRENCY = "concurrency"


class DomainError(Exception):
    """Base class for all domain errors with type discrimination."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}

    def to_dict(self) -> dict[str, str | dict[str, str | int | bool | None]]:
        """Convert error to dictionary for API responses."""
        return {
            "type": self.error_type.value,
            "message": self.message,
            "details": self.details,
        }


class DomainValidationError(DomainError):
    """Raised when a domain object cannot be constructed from its inputs."""

    default_code = "VALIDATION_ERROR"

    def __init__(
        self,
        field_name: str,
        value: object,
        message: str,
        error_code: str | None = None,
    ) -> None:
        self.field_name = field_name
        self.value = value
        self.error_code = error_code or self.default_code

        details: dict[str, str | int | bool | None] = {
            "field": field_name,
            "value": str(value) if value is not None else None,
            "error_code": self.error_code,
        }
        super().__init__(
            f"Validation failed for field '{field_name}': {message}",
            ErrorType.VALIDATION,
            details,
        )


class InvalidIdentifierError(DomainValidationError):
    """Raised when a tracking identifier is not well formed."""

    default_code = "INVALID_IDENTIFIER"


class InvalidSpecificationError(DomainValidationError):
    """Raised when a route specification is structurally invalid."""

    default_code = "INVALID_SPECIFICATION"


class InvalidItineraryError(DomainValidationError):
    """Raised when an itinerary or one of its legs is malformed."""

    default_code = "INVALID_ITINERARY"


class InvalidArgumentError(DomainValidationError):
    """Raised when an aggregate operation receives a missing or mistyped argument."""

    default_code = "INVALID_ARGUMENT"


class BusinessRuleViolation(DomainError):
    """Raised when a business rule is violated."""

    def __init__(
        self,
        rule_name: str,
        message: str,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        super().__init__(
            f"Business rule '{rule_name}' violated: {message}",
            ErrorType.BUSINESS_RULE,
            details,
        )
        self.rule_name = rule_name


class RouteNotSatisfiedError(BusinessRuleViolation):
    """Raised when an itinerary does not satisfy the cargo's route specification."""

    def __init__(self, tracking_id: str, reason: str = "") -> None:
        message = f"Itinerary does not satisfy route specification of cargo {tracking_id}"
        if reason:
            message += f": {reason}"
        super().__init__(
            "itinerary_satisfies_route_specification",
            message,
            {"tracking_id": tracking_id, "reason": reason or None},
        )
        self.tracking_id = tracking_id
        self.reason = reason


# Repository exceptions
class RepositoryError(DomainError):
    """Base class for repository-related errors."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.REPOSITORY,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        super().__init__(message, error_type, details)


class CargoNotFoundError(RepositoryError):
    """Raised when a cargo is not found."""

    def __init__(self, tracking_id: str) -> None:
        details = {"tracking_id": tracking_id, "entity_type": "cargo"}
        super().__init__(f"Cargo not found: {tracking_id}", ErrorType.NOT_FOUND, details)
        self.tracking_id = tracking_id


class ConcurrencyError(RepositoryError):
    """Raised when concurrent modification conflicts occur."""

    def __init__(
        self, tracking_id: str, expected_version: int, actual_version: int
    ) -> None:
        details = {
            "tracking_id": tracking_id,
            "expected_version": expected_version,
            "actual_version": actual_version,
        }
        super().__init__(
            f"Concurrent modification of cargo {tracking_id}: "
            f"expected version {expected_version}, found {actual_version}",
            ErrorType.CONCURRENCY,
            details,
        )
        self.tracking_id = tracking_id
        self.expected_version = expected_version
        self.actual_version = actual_version
