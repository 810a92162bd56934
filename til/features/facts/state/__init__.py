"""Per-session UI state for the facts feature."""

from .controller import FactCollectionController
from .notifications import Notification, NotificationCenter
from .sessions import FactsSession, SessionRegistry, SessionUseCases, create_session
from .submission_form import SubmissionForm
from .vote_action import VoteAction

__all__ = [
    "FactCollectionController",
    "SubmissionForm",
    "VoteAction",
    "FactsSession",
    "SessionRegistry",
    "SessionUseCases",
    "create_session",
    "Notification",
    "NotificationCenter",
]
