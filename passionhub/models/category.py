"""Category data model and the fixed set of journal categories."""

from typing import Optional
from pydantic import BaseModel, Field


class Category(BaseModel):
    """A journal topic bucket."""

    key: str = Field(..., min_length=1, description="Stable key used for filtering and queries")
    label: str = Field(..., min_length=1, description="Display label")

    model_config = {"frozen": True}


CATEGORIES: tuple[Category, ...] = (
    Category(key="football", label="Football"),
    Category(key="star-wars", label="Star Wars"),
    Category(key="coding", label="Coding"),
    Category(key="drawing", label="Drawing"),
    Category(key="music", label="Music"),
    Category(key="art", label="Art"),
    Category(key="hacking", label="Hacking"),
)

DEFAULT_CATEGORY = "football"


def category_keys() -> list[str]:
    """Return category keys in declared order."""
    return [category.key for category in CATEGORIES]


def get_category(key: str) -> Optional[Category]:
    """Look up a category by key.

    Args:
        key: Category key.

    Returns:
        The matching Category, or None for an unknown key.
    """
    for category in CATEGORIES:
        if category.key == key:
            return category
    return None


def category_label(key: str) -> str:
    """Return the display label for a key.

    Unknown keys are accepted everywhere a category is selected, so they
    get a title-cased fallback instead of an error.
    """
    category = get_category(key)
    if category is not None:
        return category.label
    return key.replace("-", " ").title()
