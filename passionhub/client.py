"""Journal client: session state plus the list and create flows.

All state lives in one JournalState owned by a JournalClient. Mutations
happen on the event loop thread only, so no locking is done. Fetches are
never cancelled; when several are in flight their results are merged in
arrival order, and the first one to finish clears the loading flag.
"""

import asyncio
import logging
from typing import Callable, Optional

from passionhub.api.base import BaseEntriesApi
from passionhub.models import DEFAULT_CATEGORY, Draft, Entry, NewEntry

logger = logging.getLogger(__name__)

Listener = Callable[["JournalState"], None]


class JournalState:
    """Mutable session state of the journal client."""

    def __init__(self, active_category: str = DEFAULT_CATEGORY):
        self.active_category = active_category
        self.entries: dict[str, Entry] = {}
        self.is_loading = False
        self.draft = Draft()

    @property
    def visible_entries(self) -> list[Entry]:
        """Entries of the active category in merge order."""
        return [e for e in self.entries.values() if e.category == self.active_category]

    def __repr__(self) -> str:
        return (
            f"JournalState(active_category={self.active_category!r}, "
            f"entries={len(self.entries)}, is_loading={self.is_loading}, "
            f"draft={self.draft!r})"
        )


def merge_entries(existing: dict[str, Entry], incoming: list[Entry]) -> dict[str, Entry]:
    """Merge fetched entries into the stored ones by identifier.

    Stored entries come first, then the fetched ones. A fetched entry
    replaces the stored copy with the same id but keeps its position;
    unseen ids are appended in the order received.

    Args:
        existing: Stored entries keyed by id.
        incoming: Entries returned by the service.

    Returns:
        A new mapping; ``existing`` is not modified.
    """
    merged = dict(existing)
    for entry in incoming:
        merged[entry.id] = entry
    return merged


class JournalClient:
    """Client-side journal state container.

    Example:
        async with JournalClient(HttpEntriesApi(config.api_base)) as client:
            await client.fetch_entries("football")
            print(client.visible_entries)
    """

    def __init__(self, api: BaseEntriesApi, default_category: str = DEFAULT_CATEGORY):
        """Initialize the client with a fresh, empty state.

        Args:
            api: Entries service collaborator.
            default_category: Category active at session start.
        """
        self.api = api
        self.state = JournalState(active_category=default_category)
        self._listeners: list[Listener] = []
        self._tasks: set[asyncio.Task] = set()

    async def __aenter__(self) -> "JournalClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    # ==================== Notifications ====================

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a callable invoked with the state after every change.

        Returns:
            A callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self.state)
            except Exception:
                logger.exception("State listener %r failed", listener)

    # ==================== Views ====================

    @property
    def active_category(self) -> str:
        return self.state.active_category

    @property
    def entries(self) -> dict[str, Entry]:
        return self.state.entries

    @property
    def is_loading(self) -> bool:
        return self.state.is_loading

    @property
    def draft(self) -> Draft:
        return self.state.draft

    @property
    def visible_entries(self) -> list[Entry]:
        return self.state.visible_entries

    # ==================== Operations ====================

    def start(self) -> asyncio.Task:
        """Load the active category for a freshly opened session."""
        return self._schedule(self.fetch_entries(self.state.active_category))

    def select_category(self, key: str) -> asyncio.Task:
        """Make ``key`` the active category and load its entries.

        The key is not checked against the known categories; an unknown
        key simply shows nothing. Selecting the current category again
        still triggers a new fetch.

        Must be called while an event loop is running.

        Returns:
            The scheduled fetch task.
        """
        self.set_active_category(key)
        return self._schedule(self.fetch_entries(key))

    def set_active_category(self, key: str) -> None:
        """Change the active category without loading it."""
        self.state.active_category = key
        self._notify()

    def update_draft(
        self,
        title: Optional[str] = None,
        content: Optional[str] = None,
        mood: Optional[str] = None,
    ) -> Draft:
        """Replace the given draft fields."""
        changes = {}
        if title is not None:
            changes["title"] = title
        if content is not None:
            changes["content"] = content
        if mood is not None:
            changes["mood"] = mood
        self.state.draft = self.state.draft.model_copy(update=changes)
        self._notify()
        return self.state.draft

    async def fetch_entries(self, category: str) -> None:
        """Fetch a category's entries and merge them into the state.

        Failures are logged and leave the stored entries as they were.
        This coroutine does not raise.
        """
        self.state.is_loading = True
        self._notify()
        try:
            fetched = await self.api.list_entries(category)
            self.state.entries = merge_entries(self.state.entries, fetched)
        except Exception:
            logger.exception("Failed to fetch entries for category=%s", category)
        finally:
            self.state.is_loading = False
            self._notify()

    async def submit_entry(
        self,
        category: str,
        title: str,
        content: str,
        mood: Optional[str] = "",
    ) -> bool:
        """Create an entry, then reload the category.

        Nothing is sent when title or content is blank. On success the
        draft is cleared before the reload; on failure the draft is kept
        so the input can be retried.

        Returns:
            True if the entry was created, False otherwise.
        """
        if not title.strip() or not content.strip():
            logger.debug("Skipping submit: title and content are required")
            return False

        new_entry = NewEntry(
            category=category,
            title=title,
            content=content,
            mood=mood or "",
        )
        try:
            await self.api.create_entry(new_entry)
        except Exception:
            logger.exception("Failed to create entry in category=%s", category)
            return False

        self.state.draft = Draft()
        self._notify()
        await self.fetch_entries(category)
        return True

    async def submit_draft(self) -> bool:
        """Submit the current draft to the active category."""
        draft = self.state.draft
        return await self.submit_entry(
            self.state.active_category, draft.title, draft.content, draft.mood
        )

    # ==================== Lifecycle ====================

    def _schedule(self, coro) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def wait_idle(self) -> None:
        """Wait for every fetch scheduled by this client to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    async def aclose(self) -> None:
        """Finish pending fetches and release the collaborator."""
        await self.wait_idle()
        await self.api.aclose()
