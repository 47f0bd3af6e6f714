"""Cargo aggregate root, the central class of the booking domain."""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationInfo, field_validator, model_validator

from ...shared.base import AggregateRoot
from ...shared.exceptions import InvalidArgumentError
from ...shared.validation import check_location_code
from ...shared.validation_config import get_error_message
from ..value_objects.itinerary import Itinerary
from ..value_objects.route_specification import RESTORE_CONTEXT, RouteSpecification
from ..value_objects.tracking_id import TrackingId


def _wrong_type(field_name: str, value: Any, expected: str) -> InvalidArgumentError:
    if value is None:
        message = get_error_message("required_field", field_name=field_name)
    else:
        message = get_error_message(
            "invalid_type", field_name=field_name, expected=expected
        )
    return InvalidArgumentError(field_name, value, message)


def _origin_of_initial_route(data: dict[str, Any]) -> str:
    return data["route_specification"].origin


class Cargo(AggregateRoot):
    """
    A cargo, identified by a unique tracking id.

    A cargo always has an origin and a route specification. Its life cycle
    begins with booking, when the tracking id is assigned. Between booking and
    initial routing the cargo has no itinerary, and ``itinerary`` returns the
    empty itinerary instead.

    The booking clerk picks one of the routes matching the route
    specification and assigns the cargo to it; that route is described by an
    itinerary. On customer demand a cargo can be re-routed during transport:
    a new route is specified, and the old itinerary, being a value object, is
    replaced once a new one is assigned. Until then the itinerary may no
    longer satisfy the specification.

    The origin is taken from the route specification given at booking and
    stays fixed for the cargo's whole life, whatever later specifications say.
    """

    tracking_id: TrackingId = Field(frozen=True)
    route_specification: RouteSpecification
    origin: str = Field(default_factory=_origin_of_initial_route, frozen=True)
    assigned_itinerary: Itinerary | None = None

    @model_validator(mode="before")
    @classmethod
    def check_components(cls, data: Any) -> Any:
        """Check the component types, on construction and on every assignment."""
        if not isinstance(data, dict):
            raise InvalidArgumentError(
                "cargo", data, "cargo must be given as keyword fields"
            )

        values = dict(data)
        tracking_id = values.get("tracking_id")
        if not isinstance(tracking_id, TrackingId):
            raise _wrong_type("tracking_id", tracking_id, "TrackingId")

        route_specification = values.get("route_specification")
        if not isinstance(route_specification, RouteSpecification):
            raise _wrong_type(
                "route_specification", route_specification, "RouteSpecification"
            )

        itinerary = values.get("assigned_itinerary")
        if itinerary is not None and not isinstance(itinerary, Itinerary):
            raise _wrong_type("assigned_itinerary", itinerary, "Itinerary")
        return values

    @field_validator("origin", mode="before")
    @classmethod
    def origin_only_on_restore(cls, v: Any, info: ValidationInfo) -> Any:
        """An explicit origin is accepted only when a stored cargo is rebuilt."""
        if not (info.context and info.context.get("restore")):
            raise InvalidArgumentError(
                "origin",
                v,
                get_error_message(
                    "derived_field",
                    field_name="origin",
                    source="initial route specification",
                ),
            )
        problem = check_location_code("origin", v)
        if problem:
            raise InvalidArgumentError("origin", v, problem)
        return v

    @classmethod
    def create(
        cls, tracking_id: TrackingId, route_specification: RouteSpecification
    ) -> Cargo:
        """Book a new cargo: identity and origin are fixed from here on."""
        return cls(tracking_id=tracking_id, route_specification=route_specification)

    @classmethod
    def reconstitute(
        cls,
        tracking_id: TrackingId,
        origin: str,
        route_specification: RouteSpecification,
        itinerary: Itinerary | None = None,
    ) -> Cargo:
        """
        Rebuild a stored cargo.

        The origin is restored verbatim; after a re-route it differs from
        the current specification's origin and must not be derived again.
        """
        return cls.model_validate(
            {
                "tracking_id": tracking_id,
                "route_specification": route_specification,
                "origin": origin,
                "assigned_itinerary": itinerary,
            },
            context=RESTORE_CONTEXT,
        )

    @property
    def identity(self) -> TrackingId:
        return self.tracking_id

    @property
    def itinerary(self) -> Itinerary:
        """The assigned itinerary, or the empty itinerary. Never None."""
        if self.assigned_itinerary is None:
            return Itinerary.empty()
        return self.assigned_itinerary

    @property
    def is_routed(self) -> bool:
        return not self.itinerary.is_empty

    @property
    def is_misrouted(self) -> bool:
        """Routed, but the itinerary no longer satisfies the route specification."""
        return self.is_routed and not self.route_specification.is_satisfied_by(
            self.itinerary
        )

    def specify_new_route(self, route_specification: RouteSpecification) -> None:
        """
        Specify a new route for this cargo.

        The current itinerary is kept as is, even if it does not satisfy the
        new specification; the routing workflow assigns a new one.
        """
        if not isinstance(route_specification, RouteSpecification):
            raise _wrong_type(
                "route_specification", route_specification, "RouteSpecification"
            )
        self.route_specification = route_specification

    def assign_to_route(self, itinerary: Itinerary) -> None:
        """
        Attach a new itinerary to this cargo, replacing the previous one.

        Whether the itinerary satisfies the route specification is for the
        caller to check.
        """
        if not isinstance(itinerary, Itinerary):
            raise _wrong_type("itinerary", itinerary, "Itinerary")
        self.assigned_itinerary = itinerary
