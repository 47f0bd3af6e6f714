"""
Route Specification Value Object

Describes where a cargo has to go: the origin it leaves from, the destination
it must reach and, optionally, the deadline by which it must arrive.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import ValidationInfo, model_validator

from ...shared.base import ValueObject
from ...shared.exceptions import InvalidSpecificationError
from ...shared.validation import as_utc, check_location_code, utc_now
from ...shared.validation_config import get_error_message
from .itinerary import Itinerary

# Validation context flag used when persistence restores a stored specification;
# a deadline that was valid at booking time may have passed since.
RESTORE_CONTEXT = {"restore": True}


class RouteSpecification(ValueObject):
    """
    Required origin, destination and arrival deadline of a cargo's journey.

    Replaced wholesale when a customer's requirements change. All rules are
    checked at construction; an existing specification is always valid.
    """

    origin: str
    destination: str
    arrival_deadline: datetime | None = None

    @model_validator(mode="before")
    @classmethod
    def validate_specification(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, dict):
            raise InvalidSpecificationError(
                "route_specification",
                data,
                "route specification must be given as keyword fields",
            )

        values = dict(data)
        for field_name in ("origin", "destination"):
            location = values.get(field_name)
            if isinstance(location, str):
                location = location.strip()
                values[field_name] = location
            problem = check_location_code(field_name, location)
            if problem:
                raise InvalidSpecificationError(field_name, location, problem)

        if values["origin"] == values["destination"]:
            raise InvalidSpecificationError(
                "destination",
                values["destination"],
                get_error_message(
                    "same_locations", first="origin", second="destination"
                ),
            )

        deadline = values.get("arrival_deadline")
        if deadline is not None:
            if not isinstance(deadline, datetime):
                raise InvalidSpecificationError(
                    "arrival_deadline",
                    deadline,
                    get_error_message(
                        "invalid_type",
                        field_name="arrival_deadline",
                        expected="datetime",
                    ),
                )
            deadline = as_utc(deadline)
            restoring = bool(info.context and info.context.get("restore"))
            if not restoring and deadline <= utc_now():
                raise InvalidSpecificationError(
                    "arrival_deadline",
                    deadline,
                    get_error_message("date_not_future", field_name="arrival_deadline"),
                )
            values["arrival_deadline"] = deadline
        return values

    @classmethod
    def restore(
        cls, origin: str, destination: str, arrival_deadline: datetime | None = None
    ) -> RouteSpecification:
        """Rebuild a stored specification without the booking-time deadline check."""
        return cls.model_validate(
            {
                "origin": origin,
                "destination": destination,
                "arrival_deadline": arrival_deadline,
            },
            context=RESTORE_CONTEXT,
        )

    def with_destination(self, destination: str) -> RouteSpecification:
        """Same origin and deadline, another destination."""
        return RouteSpecification(
            origin=self.origin,
            destination=destination,
            arrival_deadline=self.arrival_deadline,
        )

    def is_satisfied_by(self, itinerary: Itinerary) -> bool:
        """
        Check whether an itinerary fulfils this specification.

        The itinerary must be connected, start at the origin, end at the
        destination and, when both a deadline and a final unload time are
        known, arrive no later than the deadline.
        """
        if not isinstance(itinerary, Itinerary) or itinerary.is_empty:
            return False
        if not itinerary.is_connected:
            return False
        if itinerary.initial_departure_location != self.origin:
            return False
        if itinerary.final_arrival_location != self.destination:
            return False

        arrival = itinerary.final_arrival_time
        if self.arrival_deadline is not None and arrival is not None:
            return arrival <= self.arrival_deadline
        return True
