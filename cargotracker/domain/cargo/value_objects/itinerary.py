"""
Itinerary Value Object

An itinerary is the concrete route a cargo has been assigned: an ordered
sequence of legs, each loading the cargo at one location and unloading it at
another. The empty itinerary stands for "not yet routed".
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Any

from pydantic import field_validator, model_validator

from ...shared.base import ValueObject
from ...shared.exceptions import InvalidItineraryError
from ...shared.validation import as_utc, check_code, check_location_code
from ...shared.validation_config import get_error_message


class Leg(ValueObject):
    """One load/unload segment of an itinerary."""

    load_location: str
    unload_location: str
    voyage_number: str | None = None
    load_time: datetime | None = None
    unload_time: datetime | None = None

    @model_validator(mode="before")
    @classmethod
    def validate_leg(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            raise InvalidItineraryError(
                "leg", data, "leg must be given as keyword fields"
            )

        values = dict(data)
        for field_name in ("load_location", "unload_location"):
            location = values.get(field_name)
            if isinstance(location, str):
                location = location.strip()
                values[field_name] = location
            problem = check_location_code(field_name, location)
            if problem:
                raise InvalidItineraryError(field_name, location, problem)

        if values["load_location"] == values["unload_location"]:
            raise InvalidItineraryError(
                "unload_location",
                values["unload_location"],
                get_error_message(
                    "same_locations", first="load_location", second="unload_location"
                ),
            )

        voyage_number = values.get("voyage_number")
        if voyage_number is not None:
            problem = check_code("voyage_number", "voyage_number", voyage_number)
            if problem:
                raise InvalidItineraryError("voyage_number", voyage_number, problem)

        for field_name in ("load_time", "unload_time"):
            moment = values.get(field_name)
            if moment is None:
                continue
            if not isinstance(moment, datetime):
                raise InvalidItineraryError(
                    field_name,
                    moment,
                    get_error_message(
                        "invalid_type", field_name=field_name, expected="datetime"
                    ),
                )
            values[field_name] = as_utc(moment)

        load_time = values.get("load_time")
        unload_time = values.get("unload_time")
        if load_time and unload_time and unload_time < load_time:
            raise InvalidItineraryError(
                "unload_time",
                unload_time,
                get_error_message(
                    "invalid_date_range", first="load_time", second="unload_time"
                ),
            )
        return values


class Itinerary(ValueObject):
    """
    Ordered, immutable sequence of legs.

    A changed route is represented by a new Itinerary; there are no mutators.
    """

    legs: tuple[Leg, ...] = ()

    @field_validator("legs", mode="before")
    @classmethod
    def collect_legs(cls, v: Any) -> tuple[Leg, ...]:
        if v is None:
            return ()
        if isinstance(v, (str, bytes)) or not isinstance(v, Iterable):
            raise InvalidItineraryError(
                "legs",
                v,
                get_error_message(
                    "invalid_type", field_name="legs", expected="sequence of legs"
                ),
            )

        legs = []
        for position, leg in enumerate(v):
            if isinstance(leg, dict):
                leg = Leg(**leg)
            if not isinstance(leg, Leg):
                raise InvalidItineraryError(
                    f"legs[{position}]",
                    leg,
                    get_error_message("invalid_type", field_name="leg", expected="Leg"),
                )
            legs.append(leg)
        return tuple(legs)

    @classmethod
    def empty(cls) -> Itinerary:
        """The itinerary of a cargo that has not been routed yet."""
        return _EMPTY_ITINERARY

    @classmethod
    def of(cls, *legs: Leg) -> Itinerary:
        return cls(legs=legs)

    @property
    def is_empty(self) -> bool:
        return not self.legs

    @property
    def initial_departure_location(self) -> str | None:
        return self.legs[0].load_location if self.legs else None

    @property
    def final_arrival_location(self) -> str | None:
        return self.legs[-1].unload_location if self.legs else None

    @property
    def final_arrival_time(self) -> datetime | None:
        return self.legs[-1].unload_time if self.legs else None

    @property
    def is_connected(self) -> bool:
        """Each leg unloads where the next one loads."""
        return all(
            previous.unload_location == following.load_location
            for previous, following in zip(self.legs, self.legs[1:])
        )

    def __len__(self) -> int:
        return len(self.legs)


_EMPTY_ITINERARY = Itinerary()
