"""PostgREST implementation of the fact repository.

Talks to the REST interface of the hosted backend (Supabase) through a
preconfigured httpx.AsyncClient. Filters use PostgREST operators
(``column=eq.value``), ordering uses ``order=column.desc`` and writes ask for
the affected rows back with ``Prefer: return=representation``.
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from til.features.facts.categories import Category
from til.features.facts.models import Fact, NewFact, VoteKey

from .errors import RemoteStoreError

logger = logging.getLogger(__name__)

_RETURN_REPRESENTATION = {"Prefer": "return=representation"}


class PostgrestFactRepository:
    """Fact repository backed by a PostgREST table."""

    def __init__(self, client: httpx.AsyncClient, table: str = "facts"):
        """Initialize the repository.

        Args:
            client: httpx client whose base URL points at the REST endpoint
            table: Name of the table holding facts
        """
        self.client: httpx.AsyncClient = client
        self.table: str = table

    async def list_facts(
        self, category: Category | None, order_by: VoteKey, limit: int
    ) -> list[Fact]:
        params: dict[str, str] = {"select": "*"}
        if category is not None:
            params["category"] = f"eq.{category.value}"
        params["order"] = f"{order_by.column}.desc"
        params["limit"] = str(limit)

        rows = await self._request("GET", params=params)
        return self._to_facts(rows)

    async def get_fact(self, fact_id: int) -> Fact | None:
        params = {"select": "*", "id": f"eq.{fact_id}", "limit": "1"}
        rows = await self._request("GET", params=params)
        facts = self._to_facts(rows)
        return facts[0] if facts else None

    async def insert_fact(self, new_fact: NewFact) -> Fact:
        rows = await self._request(
            "POST",
            json=[new_fact.model_dump(mode="json")],
            headers=_RETURN_REPRESENTATION,
        )
        facts = self._to_facts(rows)
        if not facts:
            raise RemoteStoreError("Insert did not return the created fact")
        return facts[0]

    async def update_vote(self, fact_id: int, vote: VoteKey, value: int) -> Fact | None:
        rows = await self._request(
            "PATCH",
            params={"id": f"eq.{fact_id}"},
            json={vote.column: value},
            headers=_RETURN_REPRESENTATION,
        )
        facts = self._to_facts(rows)
        return facts[0] if facts else None

    async def _request(
        self,
        method: str,
        params: dict[str, str] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> list[dict[str, Any]]:
        """Send a request to the table endpoint and return the decoded rows."""
        try:
            response = await self.client.request(
                method, f"/{self.table}", params=params, json=json, headers=headers
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Remote store %s /%s failed with status %s: %s",
                method,
                self.table,
                e.response.status_code,
                e.response.text,
            )
            raise RemoteStoreError(
                f"Remote store answered {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.warning("Remote store %s /%s failed: %s", method, self.table, e)
            raise RemoteStoreError(f"Remote store unreachable: {e}") from e

        try:
            rows = response.json()
        except ValueError as e:
            raise RemoteStoreError("Remote store returned invalid JSON") from e

        if not isinstance(rows, list):
            raise RemoteStoreError("Remote store returned an unexpected payload")
        return rows

    @staticmethod
    def _to_facts(rows: list[dict[str, Any]]) -> list[Fact]:
        """Validate raw rows into Fact models."""
        try:
            return [Fact.model_validate(row) for row in rows]
        except ValidationError as e:
            logger.warning("Remote store returned a malformed fact row: %s", e)
            raise RemoteStoreError("Remote store returned a malformed fact") from e
