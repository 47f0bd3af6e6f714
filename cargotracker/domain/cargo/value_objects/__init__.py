"""Value objects of the cargo domain."""

from .itinerary import Itinerary, Leg
from .route_specification import RouteSpecification
from .tracking_id import TrackingId

__all__ = ["Itinerary", "Leg", "RouteSpecification", "TrackingId"]
