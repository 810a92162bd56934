"""Pytest configuration and shared fixtures for all tests.

This module provides fixtures for:
- An in-memory remote store seeded with sample facts
- Use cases and session state wired to that store
"""

import pytest

from til.features.facts.categories import Category
from til.features.facts.state import (
    FactCollectionController,
    NotificationCenter,
    SessionUseCases,
    SubmissionForm,
)
from til.features.facts.usecases import (
    CastVoteUseCaseImpl,
    CreateFactUseCaseImpl,
    ListFactsUseCaseImpl,
)
from tests.utils.fake_store import InMemoryFactRepository


@pytest.fixture
def repository() -> InMemoryFactRepository:
    """Provide an empty in-memory fact store."""
    return InMemoryFactRepository()


@pytest.fixture
def seeded_repository(repository: InMemoryFactRepository) -> InMemoryFactRepository:
    """Provide a store holding facts across a few categories."""
    repository.add(
        text="React is being developed by Meta (formerly facebook)",
        source="https://opensource.fb.com/",
        category=Category.TECHNOLOGY,
        interesting=24,
        mindblowing=9,
        false=4,
    )
    repository.add(
        text="Millennial dads spend 3 times as much time with their kids",
        source="https://www.mother.ly/parenting/millennial-dads",
        category=Category.SOCIETY,
        interesting=11,
        mindblowing=2,
        false=0,
    )
    repository.add(
        text="Lisbon is the capital of Portugal",
        source="https://en.wikipedia.org/wiki/Lisbon",
        category=Category.SOCIETY,
        interesting=8,
        mindblowing=3,
        false=1,
    )
    return repository


@pytest.fixture
def notifications() -> NotificationCenter:
    return NotificationCenter()


@pytest.fixture
def use_cases(seeded_repository: InMemoryFactRepository) -> SessionUseCases:
    """Provide use cases wired to the seeded store."""
    return SessionUseCases(
        list_facts=ListFactsUseCaseImpl(seeded_repository, row_limit=100),
        create_fact=CreateFactUseCaseImpl(seeded_repository, max_length=200),
        cast_vote=CastVoteUseCaseImpl(seeded_repository),
    )


@pytest.fixture
def controller(
    use_cases: SessionUseCases, notifications: NotificationCenter
) -> FactCollectionController:
    return FactCollectionController(use_cases.list_facts, notifications)


@pytest.fixture
def form(
    use_cases: SessionUseCases,
    controller: FactCollectionController,
    notifications: NotificationCenter,
) -> SubmissionForm:
    return SubmissionForm(
        create_fact=use_cases.create_fact,
        collection=controller,
        notifications=notifications,
    )
