"""Entry, NewEntry and Draft data models."""

from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator


class Entry(BaseModel):
    """Represents a stored journal entry.

    The identifier is assigned by the entries service and travels on the
    wire as ``_id``. It is opaque: numeric ids are kept as their string
    form so every entry is keyed the same way.
    """

    id: str = Field(..., alias="_id", description="Identifier assigned by the entries service")
    category: str = Field(..., description="Category key")
    title: str = Field(..., description="Entry title")
    content: str = Field(..., description="Entry body, line breaks preserved")
    mood: Optional[str] = Field(default=None, description="Optional mood tag")

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_string(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class NewEntry(BaseModel):
    """Body of a create request."""

    category: str = Field(..., description="Category key")
    title: str = Field(..., description="Entry title")
    content: str = Field(..., description="Entry body")
    mood: str = Field(default="", description="Mood tag, empty when not given")

    model_config = {"frozen": True}


class Draft(BaseModel):
    """Unsaved form input for a new entry."""

    title: str = Field(default="", description="Draft title")
    content: str = Field(default="", description="Draft body")
    mood: str = Field(default="", description="Draft mood tag")

    model_config = {"frozen": True}

    def is_empty(self) -> bool:
        """True when no field holds any input."""
        return not (self.title or self.content or self.mood)
