from .cargo import Cargo

__all__ = ["Cargo"]
