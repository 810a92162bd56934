"""Hosted backend (Supabase/PostgREST) connection management.

This module provides a singleton httpx.AsyncClient preconfigured with the
PostgREST endpoint and credentials. Repositories receive the client and only
deal with table paths and query parameters.
"""

import httpx

from til.core.settings import Settings, get_settings

_client: httpx.AsyncClient | None = None


def build_store_client(
    settings: Settings, transport: httpx.AsyncBaseTransport | None = None
) -> httpx.AsyncClient:
    """Create an httpx client for the PostgREST endpoint described by settings."""
    headers = {"Accept": "application/json"}
    if settings.supabase_key:
        headers["apikey"] = settings.supabase_key
        headers["Authorization"] = f"Bearer {settings.supabase_key}"

    return httpx.AsyncClient(
        base_url=settings.rest_url,
        headers=headers,
        timeout=settings.request_timeout,
        transport=transport,
    )


async def get_store_client() -> httpx.AsyncClient:
    """Get the remote store client singleton.

    Returns:
        httpx.AsyncClient: The singleton client instance.
    """
    global _client
    if _client is None:
        _client = build_store_client(get_settings())

    return _client


async def close_store_client() -> None:
    """Close the remote store client."""
    global _client
    if _client:
        await _client.aclose()
        _client = None


async def reset_store_client() -> None:
    """Reset the remote store client for testing purposes."""
    global _client
    if _client:
        try:
            await _client.aclose()
        except Exception:
            pass  # Ignore errors during reset
        _client = None
