"""Fact models.

This module defines the Fact record as stored by the remote backend and the
payload used to create one. Field aliases match the backend column names so
rows can be validated as returned by the store.
"""

import enum

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .categories import Category


class VoteKey(str, enum.Enum):
    """The three vote counters a fact carries."""

    INTERESTING = "interesting"
    MINDBLOWING = "mindblowing"
    FALSE = "false"

    @property
    def column(self) -> str:
        """Backend column holding this counter."""
        return _VOTE_COLUMNS[self]

    @property
    def field_name(self) -> str:
        """Model attribute holding this counter."""
        return f"votes_{self.value}"


_VOTE_COLUMNS: dict[VoteKey, str] = {
    VoteKey.INTERESTING: "votesIntr",
    VoteKey.MINDBLOWING: "votesMb",
    VoteKey.FALSE: "votesFls",
}


class NewFact(BaseModel):
    """Fields supplied by the client when creating a fact.

    Everything else (id, counters, creation year) is assigned by the backend.
    """

    text: str = Field(..., description="The fact itself")
    source: str = Field(..., description="Absolute URL backing the fact")
    category: Category = Field(..., description="Category the fact is filed under")


class Fact(BaseModel):
    """A community-submitted fact with its vote counters."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., description="Backend-assigned identifier")
    text: str = Field(..., description="The fact itself")
    source: str = Field(..., description="Absolute URL backing the fact")
    category: Category = Field(..., description="Category the fact is filed under")
    votes_interesting: int = Field(default=0, ge=0, alias="votesIntr")
    votes_mindblowing: int = Field(default=0, ge=0, alias="votesMb")
    votes_false: int = Field(default=0, ge=0, alias="votesFls")
    created_in: int | None = Field(
        default=None, alias="createdIn", description="Year the fact was created"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_disputed(self) -> bool:
        """True when false votes strictly outnumber the other two combined."""
        return self.votes_false > self.votes_interesting + self.votes_mindblowing

    def votes_for(self, vote: VoteKey) -> int:
        """Return the current value of one counter."""
        return getattr(self, vote.field_name)
