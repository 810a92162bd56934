"""Fixed category table.

Categories are a closed enumeration. Each one carries the color used for its
filter button and tag. The table is static configuration and is never
persisted.
"""

import enum
from dataclasses import dataclass
from typing import Literal

ALL_CATEGORIES: Literal["all"] = "all"


class Category(str, enum.Enum):
    """Topic labels a fact can be filed under."""

    TECHNOLOGY = "technology"
    SCIENCE = "science"
    FINANCE = "finance"
    SOCIETY = "society"
    ENTERTAINMENT = "entertainment"
    HEALTH = "health"
    HISTORY = "history"
    NEWS = "news"


@dataclass(frozen=True)
class CategoryInfo:
    """Presentation attributes of a category."""

    name: Category
    color: str


CATEGORIES: tuple[CategoryInfo, ...] = (
    CategoryInfo(Category.TECHNOLOGY, "#3b82f6"),
    CategoryInfo(Category.SCIENCE, "#16a34a"),
    CategoryInfo(Category.FINANCE, "#ef4444"),
    CategoryInfo(Category.SOCIETY, "#eab308"),
    CategoryInfo(Category.ENTERTAINMENT, "#db2777"),
    CategoryInfo(Category.HEALTH, "#14b8a6"),
    CategoryInfo(Category.HISTORY, "#f97316"),
    CategoryInfo(Category.NEWS, "#8b5cf6"),
)

_COLORS: dict[Category, str] = {info.name: info.color for info in CATEGORIES}

CategoryFilter = Category | Literal["all"]


def category_color(category: Category) -> str:
    """Return the display color of a category."""
    return _COLORS[category]


def parse_category_filter(value: str | None) -> CategoryFilter:
    """Parse a filter value into a category or the synthetic "all" option.

    Raises:
        ValueError: If the value is neither "all" nor a known category
    """
    if value is None or value == ALL_CATEGORIES:
        return ALL_CATEGORIES
    try:
        return Category(value)
    except ValueError:
        raise ValueError(f"Unknown category '{value}'") from None
