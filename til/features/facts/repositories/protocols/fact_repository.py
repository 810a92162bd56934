"""Protocol definition for fact repository operations."""

from typing import Protocol

from til.features.facts.categories import Category
from til.features.facts.models import Fact, NewFact, VoteKey


class FactRepository(Protocol):
    """Protocol for a fact store.

    This protocol defines the interface the application needs from the
    hosted backend. Implementations include PostgrestFactRepository.
    All methods raise RemoteStoreError when the store cannot serve the call.
    """

    async def list_facts(
        self, category: Category | None, order_by: VoteKey, limit: int
    ) -> list[Fact]:
        """List facts, optionally restricted to one category.

        Args:
            category: Category to filter on, or None for every category.
            order_by: Counter used for descending ordering.
            limit: Maximum number of rows returned.

        Returns:
            Facts ordered by the chosen counter, highest first.
        """
        ...

    async def get_fact(self, fact_id: int) -> Fact | None:
        """Find a fact by its identifier."""
        ...

    async def insert_fact(self, new_fact: NewFact) -> Fact:
        """Insert a single fact and return the row created by the backend."""
        ...

    async def update_vote(self, fact_id: int, vote: VoteKey, value: int) -> Fact | None:
        """Set one vote counter of one fact.

        Args:
            fact_id: Identifier of the fact to update.
            vote: Counter to set.
            value: New counter value.

        Returns:
            The updated row, or None if no fact has this identifier.
        """
        ...
