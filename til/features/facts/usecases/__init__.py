"""Use cases for the facts feature."""

from .cast_vote_usecase import CastVoteUseCaseImpl
from .create_fact_usecase import CreateFactUseCaseImpl
from .errors import FactNotFoundError, FactValidationError
from .list_facts_usecase import ListFactsUseCaseImpl

__all__ = [
    "CastVoteUseCaseImpl",
    "CreateFactUseCaseImpl",
    "ListFactsUseCaseImpl",
    "FactNotFoundError",
    "FactValidationError",
]
