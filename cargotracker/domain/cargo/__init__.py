"""
Cargo domain.

The Cargo aggregate and the value objects it is built from: tracking
identity, route specification and itinerary.
"""

from .entities.cargo import Cargo
from .value_objects import Itinerary, Leg, RouteSpecification, TrackingId

__all__ = ["Cargo", "Itinerary", "Leg", "RouteSpecification", "TrackingId"]
