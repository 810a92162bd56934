"""Tests for the CastVoteUseCase."""

import pytest

from til.features.facts.models import VoteKey
from til.features.facts.repositories import RemoteStoreError
from til.features.facts.usecases import CastVoteUseCaseImpl, FactNotFoundError
from tests.utils.fake_store import InMemoryFactRepository


@pytest.mark.asyncio
@pytest.mark.parametrize("vote", list(VoteKey))
async def test_vote_increments_only_its_counter(
    seeded_repository: InMemoryFactRepository, vote: VoteKey
):
    """Test that a vote adds exactly one to its counter and nothing else."""
    before = dict(seeded_repository.rows)
    target = before[1]
    use_case = CastVoteUseCaseImpl(repository=seeded_repository)

    updated = await use_case.execute(
        fact_id=target.id, vote=vote, current_votes=target.votes_for(vote)
    )

    for key in VoteKey:
        expected = target.votes_for(key) + (1 if key is vote else 0)
        assert updated.votes_for(key) == expected
    assert seeded_repository.rows[2] == before[2]
    assert seeded_repository.rows[3] == before[3]


@pytest.mark.asyncio
async def test_current_value_is_read_when_not_given(
    seeded_repository: InMemoryFactRepository,
):
    use_case = CastVoteUseCaseImpl(repository=seeded_repository)

    updated = await use_case.execute(fact_id=1, vote=VoteKey.FALSE)

    assert updated.votes_false == 5
    assert seeded_repository.call_names() == ["get_fact", "update_vote"]


@pytest.mark.asyncio
async def test_known_current_value_skips_the_read(
    seeded_repository: InMemoryFactRepository,
):
    use_case = CastVoteUseCaseImpl(repository=seeded_repository)

    await use_case.execute(fact_id=1, vote=VoteKey.FALSE, current_votes=4)

    assert seeded_repository.call_names() == ["update_vote"]
    assert seeded_repository.calls[0] == ("update_vote", 1, VoteKey.FALSE, 5)


@pytest.mark.asyncio
async def test_unknown_fact_raises(seeded_repository: InMemoryFactRepository):
    use_case = CastVoteUseCaseImpl(repository=seeded_repository)

    with pytest.raises(FactNotFoundError):
        await use_case.execute(fact_id=99, vote=VoteKey.INTERESTING)

    with pytest.raises(FactNotFoundError):
        await use_case.execute(fact_id=99, vote=VoteKey.INTERESTING, current_votes=0)


@pytest.mark.asyncio
async def test_store_failure_propagates(seeded_repository: InMemoryFactRepository):
    seeded_repository.fail("update_vote")
    use_case = CastVoteUseCaseImpl(repository=seeded_repository)

    with pytest.raises(RemoteStoreError):
        await use_case.execute(fact_id=1, vote=VoteKey.INTERESTING, current_votes=24)
