"""Shared fixtures for the cargo domain, persistence and booking tests."""

from datetime import datetime, timedelta, timezone

import pytest

from cargotracker.application.services.booking_service import CargoBookingService
from cargotracker.domain.cargo.entities.cargo import Cargo
from cargotracker.domain.cargo.value_objects.itinerary import Itinerary, Leg
from cargotracker.domain.cargo.value_objects.route_specification import (
    RouteSpecification,
)
from cargotracker.domain.cargo.value_objects.tracking_id import TrackingId
from cargotracker.infrastructure.persistence.in_memory_cargo_repository import (
    InMemoryCargoRepository,
)


@pytest.fixture
def now() -> datetime:
    return datetime.now(timezone.utc)


@pytest.fixture
def arrival_deadline(now) -> datetime:
    """A deadline comfortably in the future."""
    return (now + timedelta(days=30)).replace(microsecond=0)


@pytest.fixture
def tracking_id() -> TrackingId:
    return TrackingId.generate()


@pytest.fixture
def nyc_to_tokyo() -> RouteSpecification:
    return RouteSpecification(origin="NYC", destination="TOKYO")


@pytest.fixture
def nyc_to_osaka() -> RouteSpecification:
    return RouteSpecification(origin="NYC", destination="OSAKA")


@pytest.fixture
def cargo(tracking_id, nyc_to_tokyo) -> Cargo:
    """A freshly booked, unrouted cargo from NYC to TOKYO."""
    return Cargo.create(tracking_id, nyc_to_tokyo)


@pytest.fixture
def nyc_tokyo_itinerary() -> Itinerary:
    return Itinerary(
        legs=[
            Leg(load_location="NYC", unload_location="LONGBEACH", voyage_number="V100"),
            Leg(load_location="LONGBEACH", unload_location="TOKYO", voyage_number="V200"),
        ]
    )


@pytest.fixture
def nyc_osaka_itinerary() -> Itinerary:
    return Itinerary(
        legs=[
            Leg(load_location="NYC", unload_location="HONOLULU"),
            Leg(load_location="HONOLULU", unload_location="OSAKA"),
        ]
    )


@pytest.fixture
def repository() -> InMemoryCargoRepository:
    return InMemoryCargoRepository()


@pytest.fixture
def booking_service(repository) -> CargoBookingService:
    return CargoBookingService(repository)
