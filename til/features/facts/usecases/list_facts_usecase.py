"""Use case for listing facts."""

from til.features.facts.categories import ALL_CATEGORIES, CategoryFilter
from til.features.facts.models import Fact, VoteKey
from til.features.facts.repositories.protocols import FactRepository


class ListFactsUseCaseImpl:
    """Implementation of the list facts use case."""

    def __init__(self, repository: FactRepository, row_limit: int = 100):
        """Initialize the use case with dependencies.

        Args:
            repository: Repository for remote store operations
            row_limit: Maximum number of facts returned by one listing
        """
        self.repository = repository
        self.row_limit = row_limit

    async def execute(self, category: CategoryFilter = ALL_CATEGORIES) -> list[Fact]:
        """List facts for a category, most interesting first.

        Args:
            category: A category, or "all" for no restriction

        Returns:
            At most row_limit facts ordered by interesting votes, descending

        Raises:
            RemoteStoreError: If the remote store cannot serve the read
        """
        return await self.repository.list_facts(
            category=None if category == ALL_CATEGORIES else category,
            order_by=VoteKey.INTERESTING,
            limit=self.row_limit,
        )
