from .cargo_mapper import CargoMapper

__all__ = ["CargoMapper"]
