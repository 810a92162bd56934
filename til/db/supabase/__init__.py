"""Hosted backend client module."""

from til.db.supabase.connection import (
    build_store_client,
    close_store_client,
    get_store_client,
    reset_store_client,
)

__all__ = [
    "build_store_client",
    "get_store_client",
    "close_store_client",
    "reset_store_client",
]
