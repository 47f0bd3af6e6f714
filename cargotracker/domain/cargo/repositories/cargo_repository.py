"""
Cargo Repository Interface

Defines the contract for cargo data access operations.
"""

from abc import ABC, abstractmethod

from ..entities.cargo import Cargo
from ..value_objects.tracking_id import TrackingId


class CargoRepository(ABC):
    """
    Abstract repository interface for Cargo aggregates.

    Implementations store each cargo under its tracking id together with an
    integer version used for optimistic concurrency control: the first save
    of a cargo yields version 1 and every further save increments it.
    """

    def next_tracking_id(self) -> TrackingId:
        """
        Hand out the tracking id for a cargo about to be booked.

        Returns:
            A tracking id not used by any stored cargo
        """
        return TrackingId.generate()

    @abstractmethod
    def get(self, tracking_id: TrackingId) -> Cargo | None:
        """
        Retrieve a cargo by its tracking id.

        Args:
            tracking_id: Tracking id of the cargo

        Returns:
            Cargo aggregate or None if not found
        """

    @abstractmethod
    def get_version(self, tracking_id: TrackingId) -> int:
        """
        Current stored version of a cargo.

        Raises:
            CargoNotFoundError: If no cargo is stored under the tracking id
        """

    @abstractmethod
    def save(self, cargo: Cargo, expected_version: int | None = None) -> int:
        """
        Store a cargo.

        Args:
            cargo: Cargo aggregate to store
            expected_version: Version the caller loaded; None skips the check

        Returns:
            The new stored version

        Raises:
            ConcurrencyError: If the stored version differs from expected_version
        """

    @abstractmethod
    def remove(self, tracking_id: TrackingId) -> bool:
        """
        Delete a cargo.

        Returns:
            True if a cargo was removed
        """

    @abstractmethod
    def all(self) -> list[Cargo]:
        """Retrieve all stored cargos."""
