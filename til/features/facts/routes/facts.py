"""Facts JSON API route handlers."""

from typing import Protocol

from fastapi import APIRouter, Depends, HTTPException, Path, status

from til.features.facts.categories import (
    CATEGORIES,
    CategoryFilter,
    parse_category_filter,
)
from til.features.facts.dependencies import (
    get_cast_vote_use_case,
    get_create_fact_use_case,
    get_list_facts_use_case,
)
from til.features.facts.dtos import CategoryDto, CreateFactRequest, FactListResponse
from til.features.facts.models import Fact, VoteKey
from til.features.facts.repositories import RemoteStoreError
from til.features.facts.usecases import FactNotFoundError, FactValidationError


class ListFactsUseCase(Protocol):
    """Protocol for the list facts use case."""

    async def execute(self, category: CategoryFilter = "all") -> list[Fact]:
        """List facts for a category."""
        ...


class CreateFactUseCase(Protocol):
    """Protocol for the create fact use case."""

    async def execute(self, text: str, source: str, category: str) -> Fact:
        """Validate and insert a new fact."""
        ...


class CastVoteUseCase(Protocol):
    """Protocol for the cast vote use case."""

    async def execute(
        self, fact_id: int, vote: VoteKey, current_votes: int | None = None
    ) -> Fact:
        """Increment one vote counter of one fact."""
        ...


def _bad_gateway(e: RemoteStoreError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))


router = APIRouter()


@router.get("/facts", response_model=FactListResponse)
async def list_facts(
    category: str = "all",
    use_case: ListFactsUseCase = Depends(get_list_facts_use_case),
) -> FactListResponse:
    """List facts, most interesting first.

    Args:
        category: A category name, or 'all' (default) for every category
    """
    try:
        category_filter = parse_category_filter(category)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    try:
        facts = await use_case.execute(category_filter)
    except RemoteStoreError as e:
        raise _bad_gateway(e)

    return FactListResponse(category=category, count=len(facts), facts=facts)


@router.post("/facts", response_model=Fact, status_code=status.HTTP_201_CREATED)
async def create_fact(
    request: CreateFactRequest,
    use_case: CreateFactUseCase = Depends(get_create_fact_use_case),
) -> Fact:
    """Share a new fact.

    The returned record carries the identifier, counters and creation year
    assigned by the remote store.
    """
    try:
        return await use_case.execute(
            text=request.text, source=request.source, category=request.category
        )
    except FactValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.errors
        )
    except RemoteStoreError as e:
        raise _bad_gateway(e)


@router.post("/facts/{fact_id}/votes/{vote}", response_model=Fact)
async def cast_vote(
    fact_id: int = Path(..., description="The fact's identifier"),
    vote: VoteKey = Path(..., description="Counter to increment"),
    use_case: CastVoteUseCase = Depends(get_cast_vote_use_case),
) -> Fact:
    """Add one vote to a fact and return the updated record."""
    try:
        return await use_case.execute(fact_id=fact_id, vote=vote)
    except FactNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except RemoteStoreError as e:
        raise _bad_gateway(e)


@router.get("/categories", response_model=list[CategoryDto])
async def list_categories() -> list[CategoryDto]:
    """List the fixed categories with their display colors."""
    return [CategoryDto(name=info.name, color=info.color) for info in CATEGORIES]
