"""Shared fixtures for Passion Hub tests."""

import asyncio
from typing import Optional

import pytest

from passionhub.api.base import BaseEntriesApi
from passionhub.models import Entry, NewEntry


class FakeEntriesApi(BaseEntriesApi):
    """In-memory stand-in for the entries service.

    ``responses`` maps a category to the raw JSON items the list call
    returns. Setting ``list_error`` or ``create_error`` makes the next
    calls raise it. ``gate`` (an asyncio.Event) holds list calls until set.
    """

    def __init__(self, responses: Optional[dict[str, list[dict]]] = None):
        self.responses = responses or {}
        self.list_calls: list[str] = []
        self.create_calls: list[NewEntry] = []
        self.list_error: Optional[Exception] = None
        self.create_error: Optional[Exception] = None
        self.gate: Optional[asyncio.Event] = None
        self.store_on_create = False
        self.closed = False
        self._next_id = 100

    async def list_entries(self, category: str) -> list[Entry]:
        self.list_calls.append(category)
        if self.gate is not None:
            await self.gate.wait()
        if self.list_error is not None:
            raise self.list_error
        return [Entry.model_validate(item) for item in self.responses.get(category, [])]

    async def create_entry(self, entry: NewEntry) -> None:
        self.create_calls.append(entry)
        if self.create_error is not None:
            raise self.create_error
        if self.store_on_create:
            self._next_id += 1
            item = {"_id": str(self._next_id), **entry.model_dump()}
            self.responses.setdefault(entry.category, []).append(item)

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def fake_api():
    """A fresh fake entries service."""
    return FakeEntriesApi()
