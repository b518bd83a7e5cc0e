"""Base entries service interface for Passion Hub."""

from abc import ABC, abstractmethod
from typing import Optional

from passionhub.models import Entry, NewEntry


class EntriesApiError(Exception):
    """Base class for failures talking to the entries service."""


class TransportError(EntriesApiError):
    """The request could not be completed (connect, timeout, network)."""


class DecodeError(EntriesApiError):
    """The response body is not the expected entry list."""


class ListRejectedError(EntriesApiError):
    """The service answered a list request with a non-success status."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        super().__init__(message or f"Listing entries failed with status {status_code}")


class CreateRejectedError(EntriesApiError):
    """The service answered a create request with a non-success status."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        super().__init__(message or f"Failed to create entry (status {status_code})")


class BaseEntriesApi(ABC):
    """Abstract base class for entries service clients.

    Implementations talk to the service that stores entries. They raise
    EntriesApiError subclasses on failure; deciding what to do with a
    failure is left to the caller.
    """

    @abstractmethod
    async def list_entries(self, category: str) -> list[Entry]:
        """List stored entries of a category.

        Args:
            category: Category key, sent as a query parameter.

        Returns:
            Entries in the order the service returned them.

        Raises:
            TransportError: If the request could not be completed.
            ListRejectedError: If the service returned a non-success status.
            DecodeError: If the body is not a JSON array. Items that are
                not valid entries are skipped, not raised.
        """
        pass

    @abstractmethod
    async def create_entry(self, entry: NewEntry) -> None:
        """Store a new entry.

        The response body is not read; callers re-list to learn the
        assigned identifier.

        Args:
            entry: Entry fields to store.

        Raises:
            TransportError: If the request could not be completed.
            CreateRejectedError: If the service returned a non-success status.
        """
        pass

    async def aclose(self) -> None:
        """Release network resources. No-op by default."""
        return None
