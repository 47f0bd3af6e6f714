"""
Flat persistence records for cargos.

A record carries the cargo's attributes as plain columns so any storage
backend can hold it; value objects are rebuilt by the mapper.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class LegRecord(BaseModel):
    load_location: str
    unload_location: str
    voyage_number: str | None = None
    load_time: datetime | None = None
    unload_time: datetime | None = None


class CargoRecord(BaseModel):
    """Stored form of a Cargo aggregate."""

    tracking_id: str
    origin: str
    spec_origin: str
    spec_destination: str
    spec_arrival_deadline: datetime | None = None
    # Empty when the cargo has not been routed
    legs: list[LegRecord] = Field(default_factory=list)
