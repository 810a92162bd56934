"""Use case for sharing a new fact."""

import logging

from til.features.facts.categories import Category
from til.features.facts.models import Fact, NewFact
from til.features.facts.repositories.protocols import FactRepository
from til.features.facts.validation import DEFAULT_MAX_FACT_LENGTH, validate_new_fact

from .errors import FactValidationError

logger = logging.getLogger(__name__)


class CreateFactUseCaseImpl:
    """Implementation of the create fact use case."""

    def __init__(
        self,
        repository: FactRepository,
        max_length: int = DEFAULT_MAX_FACT_LENGTH,
    ):
        """Initialize the use case with dependencies.

        Args:
            repository: Repository for remote store operations
            max_length: Maximum number of characters in a fact
        """
        self.repository = repository
        self.max_length = max_length

    async def execute(self, text: str, source: str, category: str) -> Fact:
        """Validate and insert a new fact.

        The backend assigns the id, zeroes the counters and sets the creation
        year, so the returned record is the one to display.

        Raises:
            FactValidationError: If the draft is invalid; nothing is sent
            RemoteStoreError: If the remote store rejects the insert
        """
        errors = validate_new_fact(text, source, category, max_length=self.max_length)
        if errors:
            raise FactValidationError(errors)

        new_fact = NewFact(
            text=text.strip(), source=source.strip(), category=Category(category)
        )
        fact = await self.repository.insert_fact(new_fact)
        logger.info("Fact %s shared in category %s", fact.id, fact.category.value)
        return fact
