"""FastAPI dependencies wiring the facts feature to the remote store."""

from fastapi import Depends

from til.core.settings import get_settings
from til.db.supabase import get_store_client
from til.features.facts.repositories import FactRepository, PostgrestFactRepository
from til.features.facts.state import SessionRegistry, SessionUseCases
from til.features.facts.usecases import (
    CastVoteUseCaseImpl,
    CreateFactUseCaseImpl,
    ListFactsUseCaseImpl,
)

_session_registry: SessionRegistry | None = None


async def get_fact_repository() -> FactRepository:
    """Dependency injection for the fact repository."""
    settings = get_settings()
    client = await get_store_client()
    return PostgrestFactRepository(client, table=settings.facts_table)


async def get_list_facts_use_case(
    repository: FactRepository = Depends(get_fact_repository),
) -> ListFactsUseCaseImpl:
    """Dependency injection for the list facts use case."""
    return ListFactsUseCaseImpl(
        repository=repository, row_limit=get_settings().fact_row_limit
    )


async def get_create_fact_use_case(
    repository: FactRepository = Depends(get_fact_repository),
) -> CreateFactUseCaseImpl:
    """Dependency injection for the create fact use case."""
    return CreateFactUseCaseImpl(
        repository=repository, max_length=get_settings().max_fact_length
    )


async def get_cast_vote_use_case(
    repository: FactRepository = Depends(get_fact_repository),
) -> CastVoteUseCaseImpl:
    """Dependency injection for the cast vote use case."""
    return CastVoteUseCaseImpl(repository=repository)


async def get_session_use_cases(
    list_facts: ListFactsUseCaseImpl = Depends(get_list_facts_use_case),
    create_fact: CreateFactUseCaseImpl = Depends(get_create_fact_use_case),
    cast_vote: CastVoteUseCaseImpl = Depends(get_cast_vote_use_case),
) -> SessionUseCases:
    """Bundle the use cases a new browser session is wired to."""
    return SessionUseCases(
        list_facts=list_facts, create_fact=create_fact, cast_vote=cast_vote
    )


def get_session_registry() -> SessionRegistry:
    """Get the browser session registry singleton."""
    global _session_registry
    if _session_registry is None:
        settings = get_settings()
        _session_registry = SessionRegistry(
            max_sessions=settings.max_sessions,
            max_length=settings.max_fact_length,
            default_source=settings.default_source_url,
        )
    return _session_registry
