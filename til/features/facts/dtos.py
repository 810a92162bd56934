"""Fact DTOs for API requests and responses."""

from pydantic import BaseModel, Field

from .categories import Category
from .models import Fact


class CreateFactRequest(BaseModel):
    """Request to share a new fact."""

    text: str = Field(..., description="The fact itself")
    source: str = Field(..., description="Absolute http(s) URL backing the fact")
    category: str = Field(..., description="Name of one of the fixed categories")


class FactListResponse(BaseModel):
    """Facts returned by a listing."""

    category: str = Field(..., description="Category filter applied, or 'all'")
    count: int = Field(..., description="Number of facts returned")
    facts: list[Fact] = Field(
        default_factory=list, description="Facts ordered by interesting votes"
    )


class CategoryDto(BaseModel):
    """DTO for a category and its display color."""

    name: Category = Field(..., description="Category name")
    color: str = Field(..., description="CSS color used to display the category")
