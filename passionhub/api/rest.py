"""REST client for the ``/api/entries`` service."""

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from passionhub.api.base import (
    BaseEntriesApi,
    CreateRejectedError,
    DecodeError,
    ListRejectedError,
    TransportError,
)
from passionhub.models import Entry, NewEntry

logger = logging.getLogger(__name__)

ENTRIES_PATH = "/api/entries"


class HttpEntriesApi(BaseEntriesApi):
    """Entries service client over HTTP using httpx.

    One AsyncClient is created lazily and reused for the lifetime of the
    instance. A client passed in by the caller is used as-is and never
    closed here.
    """

    DEFAULT_TIMEOUT = 10.0

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            base_url: Scheme and host of the entries service, without the
                ``/api/entries`` path.
            timeout: Request timeout in seconds.
            client: Optional preconfigured AsyncClient.
            transport: Optional transport for the internally created client.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None
        self._transport = transport

    @property
    def entries_url(self) -> str:
        return f"{self.base_url}{ENTRIES_PATH}"

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout, transport=self._transport)
        return self._client

    async def list_entries(self, category: str) -> list[Entry]:
        logger.debug("Listing entries: category=%s url=%s", category, self.entries_url)
        try:
            resp = await self._get_client().get(
                self.entries_url, params={"category": category}
            )
        except httpx.TransportError as e:
            raise TransportError(f"Could not reach entries service: {e}") from e

        if not resp.is_success:
            raise ListRejectedError(resp.status_code)

        try:
            data: Any = resp.json()
        except ValueError as e:
            raise DecodeError(f"Entries response is not JSON: {e}") from e

        if not isinstance(data, list):
            raise DecodeError(
                f"Expected a JSON array of entries, got {type(data).__name__}"
            )

        entries = []
        for item in data:
            try:
                entries.append(Entry.model_validate(item))
            except ValidationError as e:
                logger.warning("Skipping malformed entry in category=%s: %s", category, e)

        logger.info("Fetched %d entries for category=%s", len(entries), category)
        return entries

    async def create_entry(self, entry: NewEntry) -> None:
        logger.info("Creating entry: category=%s title=%r", entry.category, entry.title)
        try:
            resp = await self._get_client().post(
                self.entries_url,
                json=entry.model_dump(),
                headers={"Content-Type": "application/json"},
            )
        except httpx.TransportError as e:
            raise TransportError(f"Could not reach entries service: {e}") from e

        if not resp.is_success:
            raise CreateRejectedError(resp.status_code)

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
