"""
Mapper for converting between Cargo aggregates and flat persistence records.

Records are turned back into aggregates through ``Cargo.reconstitute`` so the
stored origin is used as is and never re-derived from the route
specification.
"""

from cargotracker.domain.cargo.entities.cargo import Cargo
from cargotracker.domain.cargo.value_objects.itinerary import Itinerary, Leg
from cargotracker.domain.cargo.value_objects.route_specification import (
    RouteSpecification,
)
from cargotracker.domain.cargo.value_objects.tracking_id import TrackingId

from ..records import CargoRecord, LegRecord


class CargoMapper:
    """Converts Cargo aggregates to CargoRecords and back."""

    @staticmethod
    def to_record(cargo: Cargo) -> CargoRecord:
        """
        Convert a Cargo aggregate to its flat record.

        Args:
            cargo: Cargo aggregate to convert

        Returns:
            Persistence record
        """
        specification = cargo.route_specification
        return CargoRecord(
            tracking_id=cargo.tracking_id.to_string(),
            origin=cargo.origin,
            spec_origin=specification.origin,
            spec_destination=specification.destination,
            spec_arrival_deadline=specification.arrival_deadline,
            legs=[CargoMapper._leg_to_record(leg) for leg in cargo.itinerary.legs],
        )

    @staticmethod
    def to_domain(record: CargoRecord) -> Cargo:
        """
        Convert a flat record back to a Cargo aggregate.

        Args:
            record: Persistence record to convert

        Returns:
            Cargo aggregate with origin, specification and itinerary restored
        """
        specification = RouteSpecification.restore(
            origin=record.spec_origin,
            destination=record.spec_destination,
            arrival_deadline=record.spec_arrival_deadline,
        )
        itinerary = None
        if record.legs:
            itinerary = Itinerary(
                legs=[CargoMapper._record_to_leg(leg) for leg in record.legs]
            )

        return Cargo.reconstitute(
            tracking_id=TrackingId.from_string(record.tracking_id),
            origin=record.origin,
            route_specification=specification,
            itinerary=itinerary,
        )

    @staticmethod
    def _leg_to_record(leg: Leg) -> LegRecord:
        return LegRecord(
            load_location=leg.load_location,
            unload_location=leg.unload_location,
            voyage_number=leg.voyage_number,
            load_time=leg.load_time,
            unload_time=leg.unload_time,
        )

    @staticmethod
    def _record_to_leg(record: LegRecord) -> Leg:
        return Leg(
            load_location=record.load_location,
            unload_location=record.unload_location,
            voyage_number=record.voyage_number,
            load_time=record.load_time,
            unload_time=record.unload_time,
        )
