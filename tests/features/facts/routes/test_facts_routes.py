"""Tests for the facts JSON API."""

import pytest
from httpx import AsyncClient

from tests.utils.fake_store import InMemoryFactRepository


class TestListFacts:
    """Tests for GET /api/v1/facts."""

    @pytest.mark.asyncio
    async def test_lists_every_category_by_default(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/facts")

        assert response.status_code == 200
        data = response.json()
        assert data["category"] == "all"
        assert data["count"] == 3
        assert [f["votesIntr"] for f in data["facts"]] == [24, 11, 8]

    @pytest.mark.asyncio
    async def test_filters_by_category(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/facts", params={"category": "society"})

        data = response.json()
        assert data["count"] == 2
        assert {f["category"] for f in data["facts"]} == {"society"}

    @pytest.mark.asyncio
    async def test_unknown_category_is_rejected(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/facts", params={"category": "sports"})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_store_failure_is_a_bad_gateway(
        self, client: AsyncClient, seeded_repository: InMemoryFactRepository
    ) -> None:
        seeded_repository.fail("list_facts")

        response = await client.get("/api/v1/facts")

        assert response.status_code == 502


class TestCreateFact:
    """Tests for POST /api/v1/facts."""

    @pytest.mark.asyncio
    async def test_creates_fact(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/v1/facts",
            json={
                "text": "Octopuses have three hearts",
                "source": "https://example.com",
                "category": "science",
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == 4
        assert data["votesIntr"] == 0
        assert data["votesMb"] == 0
        assert data["votesFls"] == 0
        assert data["is_disputed"] is False

    @pytest.mark.asyncio
    async def test_invalid_fact_is_rejected_without_insert(
        self, client: AsyncClient, seeded_repository: InMemoryFactRepository
    ) -> None:
        response = await client.post(
            "/api/v1/facts",
            json={"text": "a" * 201, "source": "not a url", "category": "science"},
        )

        assert response.status_code == 422
        assert "A fact can be at most 200 characters long." in response.json()["detail"]
        assert "insert_fact" not in seeded_repository.call_names()


class TestCastVote:
    """Tests for POST /api/v1/facts/{fact_id}/votes/{vote}."""

    @pytest.mark.asyncio
    async def test_increments_counter(
        self, client: AsyncClient, seeded_repository: InMemoryFactRepository
    ) -> None:
        response = await client.post("/api/v1/facts/3/votes/false")

        assert response.status_code == 200
        data = response.json()
        assert data["votesFls"] == 2
        assert data["votesIntr"] == 8
        assert data["votesMb"] == 3
        assert seeded_repository.rows[3].votes_false == 2

    @pytest.mark.asyncio
    async def test_unknown_fact(self, client: AsyncClient) -> None:
        response = await client.post("/api/v1/facts/99/votes/interesting")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_unknown_vote_key(self, client: AsyncClient) -> None:
        response = await client.post("/api/v1/facts/1/votes/boring")

        assert response.status_code == 422


@pytest.mark.asyncio
async def test_lists_categories(client: AsyncClient) -> None:
    response = await client.get("/api/v1/categories")

    assert response.status_code == 200
    categories = response.json()
    assert len(categories) == 8
    assert categories[0] == {"name": "technology", "color": "#3b82f6"}


@pytest.mark.asyncio
async def test_health(client: AsyncClient) -> None:
    response = await client.get("/health")

    assert response.json() == {"status": "healthy"}
