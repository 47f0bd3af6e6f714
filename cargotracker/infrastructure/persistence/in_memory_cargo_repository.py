"""
In-memory Cargo repository.

Keeps cargos as flat records keyed by tracking id, so every ``get`` hands
out a freshly reconstituted aggregate rather than a shared instance.
"""

import threading

from cargotracker.core.observability import get_logger
from cargotracker.domain.cargo.entities.cargo import Cargo
from cargotracker.domain.cargo.repositories.cargo_repository import CargoRepository
from cargotracker.domain.cargo.value_objects.tracking_id import TrackingId
from cargotracker.domain.shared.exceptions import CargoNotFoundError, ConcurrencyError

from .mappers.cargo_mapper import CargoMapper
from .records import CargoRecord

logger = get_logger(__name__)


class InMemoryCargoRepository(CargoRepository):
    """Thread-safe dictionary-backed repository with optimistic versioning."""

    def __init__(self) -> None:
        self._records: dict[str, tuple[CargoRecord, int]] = {}
        self._lock = threading.Lock()

    def next_tracking_id(self) -> TrackingId:
        with self._lock:
            tracking_id = TrackingId.generate()
            while tracking_id.to_string() in self._records:
                tracking_id = TrackingId.generate()
            return tracking_id

    def get(self, tracking_id: TrackingId) -> Cargo | None:
        with self._lock:
            stored = self._records.get(tracking_id.to_string())
        if stored is None:
            return None
        record, _ = stored
        return CargoMapper.to_domain(record)

    def get_version(self, tracking_id: TrackingId) -> int:
        key = tracking_id.to_string()
        with self._lock:
            stored = self._records.get(key)
        if stored is None:
            raise CargoNotFoundError(key)
        return stored[1]

    def save(self, cargo: Cargo, expected_version: int | None = None) -> int:
        record = CargoMapper.to_record(cargo)
        key = record.tracking_id

        with self._lock:
            stored = self._records.get(key)
            current_version = stored[1] if stored else 0
            if expected_version is not None and expected_version != current_version:
                logger.warning(
                    "cargo_version_conflict",
                    tracking_id=key,
                    expected_version=expected_version,
                    actual_version=current_version,
                )
                raise ConcurrencyError(key, expected_version, current_version)

            new_version = current_version + 1
            self._records[key] = (record, new_version)

        logger.debug("cargo_saved", tracking_id=key, version=new_version)
        return new_version

    def remove(self, tracking_id: TrackingId) -> bool:
        with self._lock:
            removed = self._records.pop(tracking_id.to_string(), None)
        return removed is not None

    def all(self) -> list[Cargo]:
        with self._lock:
            records = [record for record, _ in self._records.values()]
        return [CargoMapper.to_domain(record) for record in records]
