"""
Cargo booking domain model.

Tracking identity, route specification and itinerary value objects, the
Cargo aggregate, a flat-record persistence layer and the booking service.
"""
