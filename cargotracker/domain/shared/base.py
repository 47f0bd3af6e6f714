"""Base classes for domain entities and value objects."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Base class for value objects (immutable, defined by their values)."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def same_value_as(self, other: Any) -> bool:
        """Value objects are the same if they are of one kind with equal attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self._value_key() == other._value_key()

    def _value_key(self) -> tuple[Any, ...]:
        return tuple(getattr(self, name) for name in type(self).model_fields)

    def __eq__(self, other: Any) -> bool:
        return self.same_value_as(other)

    def __hash__(self) -> int:
        """Value objects with same values have same hash."""
        return hash((self.__class__.__name__, self._value_key()))


class Entity(BaseModel, ABC):
    """Base class for entities (have identity, can change over time)."""

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    @property
    @abstractmethod
    def identity(self) -> ValueObject:
        """The value object that identifies this entity for its whole life."""

    def same_identity_as(self, other: Any) -> bool:
        """Entities are the same if they are of one kind and their identities match."""
        if not isinstance(other, self.__class__):
            return False
        return self.identity.same_value_as(other.identity)

    def __eq__(self, other: Any) -> bool:
        return self.same_identity_as(other)

    def __hash__(self) -> int:
        """Hash based on entity identity."""
        return hash(self.identity)


class AggregateRoot(Entity, ABC):
    """Base class for aggregate roots (entities that control consistency boundaries)."""
