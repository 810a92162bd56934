"""Tests for the remote store client singleton."""

import pytest

from til.core.settings import Settings
from til.db.supabase import (
    build_store_client,
    close_store_client,
    get_store_client,
    reset_store_client,
)


@pytest.mark.asyncio
async def test_client_is_a_singleton():
    try:
        first = await get_store_client()
        second = await get_store_client()

        assert first is second
    finally:
        await reset_store_client()


@pytest.mark.asyncio
async def test_close_discards_the_client():
    first = await get_store_client()
    await close_store_client()

    second = await get_store_client()
    try:
        assert first is not second
        assert first.is_closed
    finally:
        await reset_store_client()


@pytest.mark.asyncio
async def test_client_targets_rest_endpoint_with_credentials():
    settings = Settings(
        _env_file=None, supabase_url="https://demo.supabase.co", supabase_key="k"
    )

    async with build_store_client(settings) as client:
        assert str(client.base_url) == "https://demo.supabase.co/rest/v1/"
        assert client.headers["apikey"] == "k"
        assert client.headers["Authorization"] == "Bearer k"


@pytest.mark.asyncio
async def test_client_without_key_sends_no_credentials():
    settings = Settings(_env_file=None, supabase_key=None)

    async with build_store_client(settings) as client:
        assert "apikey" not in client.headers
