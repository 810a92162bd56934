"""Fact collection controller.

Owns the facts shown to one browser session, the active category filter and
the loading flag. Every load takes a ticket from an increasing sequence and
only the latest ticket may touch state, so when filters change quickly the
last selection wins regardless of the order responses arrive in.
"""

import logging
from typing import Protocol

from til.features.facts.categories import ALL_CATEGORIES, CategoryFilter
from til.features.facts.models import Fact
from til.features.facts.repositories.errors import RemoteStoreError

from .notifications import FETCH_FAILED_MESSAGE, NotificationCenter

logger = logging.getLogger(__name__)


class ListFactsUseCase(Protocol):
    """Protocol for the list facts use case."""

    async def execute(self, category: CategoryFilter = ALL_CATEGORIES) -> list[Fact]:
        """List facts for a category."""
        ...


class FactCollectionController:
    """In-memory fact collection kept in sync with the remote store."""

    def __init__(
        self, list_facts: ListFactsUseCase, notifications: NotificationCenter
    ):
        self.list_facts = list_facts
        self.notifications = notifications
        self.facts: list[Fact] = []
        self.current_category: CategoryFilter = ALL_CATEGORIES
        self.is_loading: bool = False
        self.is_mounted: bool = False
        self._load_sequence: int = 0

    async def mount(self) -> None:
        """Perform the initial load, once."""
        if self.is_mounted:
            return
        self.is_mounted = True
        await self.load_facts(self.current_category)

    async def select_category(self, category: CategoryFilter) -> None:
        """Change the active filter and reload when it actually changed."""
        if self.is_mounted and category == self.current_category:
            return
        self.current_category = category
        self.is_mounted = True
        await self.load_facts(category)

    async def load_facts(self, category: CategoryFilter) -> bool:
        """Replace the collection with a fresh read from the store.

        Returns:
            True if the collection was replaced, False if the read failed or
            was superseded by a newer load.
        """
        self._load_sequence += 1
        ticket = self._load_sequence
        self.is_loading = True
        try:
            facts = await self.list_facts.execute(category)
        except RemoteStoreError:
            if ticket == self._load_sequence:
                self.notifications.error(FETCH_FAILED_MESSAGE)
            return False
        finally:
            if ticket == self._load_sequence:
                self.is_loading = False

        if ticket != self._load_sequence:
            logger.debug(
                "Discarding stale fact listing for %s (ticket %d, latest %d)",
                category,
                ticket,
                self._load_sequence,
            )
            return False

        self.facts = facts
        return True

    def prepend_fact(self, fact: Fact) -> None:
        self.facts = [fact, *self.facts]

    def replace_fact(self, updated: Fact) -> None:
        """Swap in the updated record; unknown identifiers are ignored."""
        self.facts = [updated if f.id == updated.id else f for f in self.facts]

    def get_fact(self, fact_id: int) -> Fact | None:
        return next((f for f in self.facts if f.id == fact_id), None)
