"""Fact repositories package."""

from .errors import RemoteStoreError
from .postgrest_repository import PostgrestFactRepository
from .protocols import FactRepository

__all__ = [
    # Implementation
    "PostgrestFactRepository",
    # Protocol
    "FactRepository",
    # Errors
    "RemoteStoreError",
]
