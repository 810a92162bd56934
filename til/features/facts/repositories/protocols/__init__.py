"""Repository protocols for the facts feature."""

from .fact_repository import FactRepository

__all__ = [
    "FactRepository",
]
