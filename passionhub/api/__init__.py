"""Entries service clients for Passion Hub."""

from passionhub.api.base import (
    BaseEntriesApi,
    CreateRejectedError,
    DecodeError,
    EntriesApiError,
    ListRejectedError,
    TransportError,
)
from passionhub.api.rest import HttpEntriesApi

__all__ = [
    "BaseEntriesApi",
    "CreateRejectedError",
    "DecodeError",
    "EntriesApiError",
    "HttpEntriesApi",
    "ListRejectedError",
    "TransportError",
]
