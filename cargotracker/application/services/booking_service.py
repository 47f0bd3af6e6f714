"""
Cargo booking application service.

Coordinates the booking and routing use cases on top of a CargoRepository:
booking a new cargo, changing its destination and assigning it to a route.
Each use case loads the cargo, applies one aggregate operation and saves it
back against the version it loaded.
"""

from datetime import datetime
from uuid import UUID

from cargotracker.core.observability import get_logger
from cargotracker.domain.cargo.entities.cargo import Cargo
from cargotracker.domain.cargo.repositories.cargo_repository import CargoRepository
from cargotracker.domain.cargo.value_objects.itinerary import Itinerary
from cargotracker.domain.cargo.value_objects.route_specification import (
    RouteSpecification,
)
from cargotracker.domain.cargo.value_objects.tracking_id import TrackingId
from cargotracker.domain.shared.exceptions import (
    CargoNotFoundError,
    InvalidArgumentError,
    RouteNotSatisfiedError,
)
from cargotracker.domain.shared.validation_config import get_error_message

logger = get_logger(__name__)


class CargoBookingService:
    """
    Application service for cargo booking and routing.

    Finding candidate routes is not part of this service: callers hand in an
    itinerary they computed. Unlike ``Cargo.assign_to_route``, which accepts
    any itinerary, ``assign_cargo_to_route`` refuses itineraries that do not
    satisfy the cargo's current route specification.
    """

    def __init__(self, repository: CargoRepository):
        """
        Initialize the booking service.

        Args:
            repository: Repository the cargos are stored in
        """
        self._repository = repository

    def book_new_cargo(
        self,
        origin: str,
        destination: str,
        arrival_deadline: datetime | None = None,
    ) -> TrackingId:
        """
        Book a new cargo.

        Args:
            origin: Location the cargo leaves from
            destination: Location the cargo must reach
            arrival_deadline: Optional latest arrival time

        Returns:
            Tracking id of the booked cargo

        Raises:
            InvalidSpecificationError: If the route requirements are invalid
        """
        route_specification = RouteSpecification(
            origin=origin,
            destination=destination,
            arrival_deadline=arrival_deadline,
        )
        tracking_id = self._repository.next_tracking_id()
        cargo = Cargo.create(tracking_id, route_specification)
        self._repository.save(cargo, expected_version=0)

        logger.info(
            "cargo_booked",
            tracking_id=tracking_id.to_string(),
            origin=origin,
            destination=destination,
        )
        return tracking_id

    def load_cargo(self, tracking_id: TrackingId | UUID | str) -> Cargo:
        """
        Load a cargo for display or further handling.

        Raises:
            InvalidIdentifierError: If the tracking id is malformed
            CargoNotFoundError: If no such cargo is booked
        """
        cargo, _ = self._load(self._as_tracking_id(tracking_id))
        return cargo

    def change_destination(
        self, tracking_id: TrackingId | UUID | str, destination: str
    ) -> RouteSpecification:
        """
        Re-route a cargo to a new destination.

        Origin and arrival deadline carry over; the assigned itinerary is
        left in place until a new route is assigned.

        Returns:
            The cargo's new route specification
        """
        tracking_id = self._as_tracking_id(tracking_id)
        cargo, version = self._load(tracking_id)

        route_specification = cargo.route_specification.with_destination(destination)
        cargo.specify_new_route(route_specification)
        self._repository.save(cargo, expected_version=version)

        logger.info(
            "cargo_destination_changed",
            tracking_id=tracking_id.to_string(),
            destination=destination,
            misrouted=cargo.is_misrouted,
        )
        return route_specification

    def assign_cargo_to_route(
        self, tracking_id: TrackingId | UUID | str, itinerary: Itinerary
    ) -> None:
        """
        Assign a cargo to a route described by an itinerary.

        Raises:
            InvalidArgumentError: If no Itinerary is given
            RouteNotSatisfiedError: If the itinerary does not satisfy the
                cargo's current route specification
        """
        if not isinstance(itinerary, Itinerary):
            raise InvalidArgumentError(
                "itinerary",
                itinerary,
                get_error_message(
                    "invalid_type", field_name="itinerary", expected="Itinerary"
                ),
            )

        tracking_id = self._as_tracking_id(tracking_id)
        cargo, version = self._load(tracking_id)

        if not cargo.route_specification.is_satisfied_by(itinerary):
            logger.warning(
                "cargo_route_rejected",
                tracking_id=tracking_id.to_string(),
                legs=len(itinerary),
            )
            raise RouteNotSatisfiedError(
                tracking_id.to_string(),
                "itinerary must run from "
                f"{cargo.route_specification.origin} to "
                f"{cargo.route_specification.destination}",
            )

        cargo.assign_to_route(itinerary)
        self._repository.save(cargo, expected_version=version)

        logger.info(
            "cargo_assigned_to_route",
            tracking_id=tracking_id.to_string(),
            legs=len(itinerary),
        )

    def _load(self, tracking_id: TrackingId) -> tuple[Cargo, int]:
        # Version first: a save in between makes ours fail instead of overwriting
        version = self._repository.get_version(tracking_id)
        cargo = self._repository.get(tracking_id)
        if cargo is None:
            raise CargoNotFoundError(tracking_id.to_string())
        return cargo, version

    @staticmethod
    def _as_tracking_id(value: TrackingId | UUID | str) -> TrackingId:
        if isinstance(value, TrackingId):
            return value
        return TrackingId(value=value)
