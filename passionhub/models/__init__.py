"""Data models for Passion Hub."""

from passionhub.models.category import (
    CATEGORIES,
    DEFAULT_CATEGORY,
    Category,
    category_keys,
    category_label,
    get_category,
)
from passionhub.models.entry import Draft, Entry, NewEntry

__all__ = [
    "CATEGORIES",
    "DEFAULT_CATEGORY",
    "Category",
    "Draft",
    "Entry",
    "NewEntry",
    "category_keys",
    "category_label",
    "get_category",
]
