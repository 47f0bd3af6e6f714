from .cargo_repository import CargoRepository

__all__ = ["CargoRepository"]
