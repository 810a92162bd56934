"""Per-fact vote casting."""

from typing import Protocol

from til.features.facts.models import Fact, VoteKey
from til.features.facts.repositories.errors import RemoteStoreError
from til.features.facts.usecases.errors import FactNotFoundError

from .controller import FactCollectionController
from .notifications import VOTE_FAILED_MESSAGE, NotificationCenter


class CastVoteUseCase(Protocol):
    """Protocol for the cast vote use case."""

    async def execute(
        self, fact_id: int, vote: VoteKey, current_votes: int | None = None
    ) -> Fact:
        """Increment one vote counter of one fact."""
        ...


class VoteAction:
    """Vote buttons of a single fact item."""

    def __init__(
        self,
        fact_id: int,
        cast_vote: CastVoteUseCase,
        collection: FactCollectionController,
        notifications: NotificationCenter,
    ):
        self.fact_id = fact_id
        self.cast_vote_use_case = cast_vote
        self.collection = collection
        self.notifications = notifications
        self.is_updating: bool = False

    async def cast_vote(self, vote: VoteKey) -> bool:
        """Add one vote to the given counter.

        The new value is computed from the record currently displayed, and
        the collection is updated with the record the store sends back.

        Returns:
            True if the collection now holds the updated record
        """
        if self.is_updating:
            return False

        fact = self.collection.get_fact(self.fact_id)
        if fact is None:
            return False

        self.is_updating = True
        try:
            updated = await self.cast_vote_use_case.execute(
                fact_id=fact.id, vote=vote, current_votes=fact.votes_for(vote)
            )
        except (RemoteStoreError, FactNotFoundError):
            self.notifications.error(VOTE_FAILED_MESSAGE)
            return False
        finally:
            self.is_updating = False

        self.collection.replace_fact(updated)
        return True
