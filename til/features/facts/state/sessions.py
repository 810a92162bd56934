"""Browser session state.

Each browser holds a cookie naming its session. A session bundles the UI
state of one visitor: the fact collection, the submission form, the vote
buttons of every item and the pending notifications. Sessions live in memory
only and the least recently used one is evicted once the registry is full.
"""

import logging
import secrets
from collections import OrderedDict
from dataclasses import dataclass, field

from til.features.facts.models import VoteKey

from .controller import FactCollectionController, ListFactsUseCase
from .notifications import NotificationCenter
from .submission_form import DEFAULT_SOURCE_URL, CreateFactUseCase, SubmissionForm
from .vote_action import CastVoteUseCase, VoteAction

logger = logging.getLogger(__name__)


@dataclass
class SessionUseCases:
    """Use cases a session runs its operations through."""

    list_facts: ListFactsUseCase
    create_fact: CreateFactUseCase
    cast_vote: CastVoteUseCase


@dataclass
class FactsSession:
    """UI state of one browser session."""

    session_id: str
    collection: FactCollectionController
    form: SubmissionForm
    notifications: NotificationCenter
    cast_vote: CastVoteUseCase
    vote_actions: dict[int, VoteAction] = field(default_factory=dict)

    def vote_action(self, fact_id: int) -> VoteAction:
        """Return the vote buttons of a fact, creating them on first use."""
        action = self.vote_actions.get(fact_id)
        if action is None:
            action = VoteAction(
                fact_id=fact_id,
                cast_vote=self.cast_vote,
                collection=self.collection,
                notifications=self.notifications,
            )
            self.vote_actions[fact_id] = action
        return action

    async def vote_on(self, fact_id: int, vote: VoteKey) -> bool:
        """Cast a vote through the buttons of a fact.

        The buttons are dropped again once no vote is pending on them.
        """
        action = self.vote_action(fact_id)
        try:
            return await action.cast_vote(vote)
        finally:
            if not action.is_updating:
                self.vote_actions.pop(fact_id, None)

    def is_updating(self, fact_id: int) -> bool:
        action = self.vote_actions.get(fact_id)
        return action is not None and action.is_updating


def create_session(
    session_id: str,
    use_cases: SessionUseCases,
    max_length: int = 200,
    default_source: str = DEFAULT_SOURCE_URL,
) -> FactsSession:
    """Build a fresh session wired to the given use cases."""
    notifications = NotificationCenter()
    collection = FactCollectionController(use_cases.list_facts, notifications)
    form = SubmissionForm(
        create_fact=use_cases.create_fact,
        collection=collection,
        notifications=notifications,
        max_length=max_length,
        default_source=default_source,
    )
    return FactsSession(
        session_id=session_id,
        collection=collection,
        form=form,
        notifications=notifications,
        cast_vote=use_cases.cast_vote,
    )


class SessionRegistry:
    """Bounded in-memory map from session id to session state."""

    def __init__(
        self,
        max_sessions: int = 1000,
        max_length: int = 200,
        default_source: str = DEFAULT_SOURCE_URL,
    ):
        self.max_sessions = max_sessions
        self.max_length = max_length
        self.default_source = default_source
        self._sessions: OrderedDict[str, FactsSession] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    @staticmethod
    def new_session_id() -> str:
        return secrets.token_urlsafe(24)

    def get_or_create(
        self, session_id: str | None, use_cases: SessionUseCases
    ) -> FactsSession:
        """Return the session for an id, starting a new one when unknown."""
        if session_id is not None and session_id in self._sessions:
            self._sessions.move_to_end(session_id)
            return self._sessions[session_id]

        session = create_session(
            self.new_session_id(),
            use_cases,
            max_length=self.max_length,
            default_source=self.default_source,
        )
        self._sessions[session.session_id] = session
        while len(self._sessions) > self.max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            logger.debug("Evicted browser session %s", evicted)
        return session
