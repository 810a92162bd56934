"""Use case for casting a vote on a fact."""

from til.features.facts.models import Fact, VoteKey
from til.features.facts.repositories.protocols import FactRepository

from .errors import FactNotFoundError


class CastVoteUseCaseImpl:
    """Implementation of the cast vote use case."""

    def __init__(self, repository: FactRepository):
        """Initialize the use case with dependencies.

        Args:
            repository: Repository for remote store operations
        """
        self.repository = repository

    async def execute(
        self, fact_id: int, vote: VoteKey, current_votes: int | None = None
    ) -> Fact:
        """Increment one vote counter of one fact by exactly one.

        Args:
            fact_id: Identifier of the fact
            vote: Counter to increment
            current_votes: Counter value as last seen by the caller. When
                omitted the current row is read from the store first.

        Returns:
            The updated fact as returned by the store

        Raises:
            FactNotFoundError: If no fact has this identifier
            RemoteStoreError: If the remote store cannot serve the request
        """
        if current_votes is None:
            fact = await self.repository.get_fact(fact_id)
            if fact is None:
                raise FactNotFoundError(fact_id)
            current_votes = fact.votes_for(vote)

        updated = await self.repository.update_vote(fact_id, vote, current_votes + 1)
        if updated is None:
            raise FactNotFoundError(fact_id)
        return updated
