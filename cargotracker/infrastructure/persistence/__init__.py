from .in_memory_cargo_repository import InMemoryCargoRepository
from .mappers.cargo_mapper import CargoMapper
from .records import CargoRecord, LegRecord

__all__ = ["CargoMapper", "CargoRecord", "InMemoryCargoRepository", "LegRecord"]
