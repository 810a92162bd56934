"""Submission form state for sharing a new fact."""

from typing import Protocol

from til.features.facts.models import Fact
from til.features.facts.repositories.errors import RemoteStoreError
from til.features.facts.usecases.errors import FactValidationError
from til.features.facts.validation import DEFAULT_MAX_FACT_LENGTH, validate_new_fact

from .controller import FactCollectionController
from .notifications import SUBMIT_FAILED_MESSAGE, NotificationCenter

DEFAULT_SOURCE_URL = "https://example.com"


class CreateFactUseCase(Protocol):
    """Protocol for the create fact use case."""

    async def execute(self, text: str, source: str, category: str) -> Fact:
        """Validate and insert a new fact."""
        ...


class SubmissionForm:
    """Draft of a new fact plus its submission status.

    The draft is only cleared, and the form only closed, once the store has
    confirmed the insert. Failed submissions keep what the user typed.
    """

    def __init__(
        self,
        create_fact: CreateFactUseCase,
        collection: FactCollectionController,
        notifications: NotificationCenter,
        max_length: int = DEFAULT_MAX_FACT_LENGTH,
        default_source: str = DEFAULT_SOURCE_URL,
    ):
        self.create_fact = create_fact
        self.collection = collection
        self.notifications = notifications
        self.max_length = max_length
        self.default_source = default_source

        self.is_open: bool = False
        self.is_submitting: bool = False
        self.errors: list[str] = []
        self.text: str = ""
        self.source: str = default_source
        self.category: str = ""

    @property
    def remaining_characters(self) -> int:
        return self.max_length - len(self.text.strip())

    def toggle(self) -> None:
        self.is_open = not self.is_open

    def update_draft(self, text: str, source: str, category: str) -> None:
        if self.is_submitting:
            return
        self.text = text
        self.source = source
        self.category = category

    def reset(self) -> None:
        self.text = ""
        self.source = self.default_source
        self.category = ""
        self.errors = []

    def validate(self) -> list[str]:
        self.errors = validate_new_fact(
            self.text, self.source, self.category, max_length=self.max_length
        )
        return self.errors

    async def submit(self) -> bool:
        """Submit the draft.

        Returns:
            True if the fact was created and prepended to the collection
        """
        if self.is_submitting:
            return False
        if self.validate():
            return False

        self.is_submitting = True
        try:
            fact = await self.create_fact.execute(
                text=self.text, source=self.source, category=self.category
            )
        except FactValidationError as e:
            self.errors = e.errors
            return False
        except RemoteStoreError:
            self.notifications.error(SUBMIT_FAILED_MESSAGE)
            return False
        finally:
            self.is_submitting = False

        self.collection.prepend_fact(fact)
        self.reset()
        self.is_open = False
        return True
