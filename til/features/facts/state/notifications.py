"""Notification channel shared by every remote operation of a session."""

from dataclasses import dataclass, field

FETCH_FAILED_MESSAGE = "An error occurred while fetching facts."
SUBMIT_FAILED_MESSAGE = "An error occurred while submitting the fact."
VOTE_FAILED_MESSAGE = "An error occurred while casting your vote."


@dataclass(frozen=True)
class Notification:
    """An error message to show the user once."""

    message: str


@dataclass
class NotificationCenter:
    """Queue of notifications waiting to be shown."""

    pending: list[Notification] = field(default_factory=list)

    def error(self, message: str) -> None:
        self.pending.append(Notification(message))

    def drain(self) -> list[Notification]:
        """Return the pending notifications and forget them."""
        notifications, self.pending = self.pending, []
        return notifications
