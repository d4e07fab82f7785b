"""Credential attachment sent along with every outgoing call."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional, Tuple

from .constants import AUTH_TICKET_HEADER


class CredentialsMetadata(Mapping[str, str]):
    """Immutable key/value bundle attached to a single call."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Optional[Mapping[str, str]] = None) -> None:
        self._entries = MappingProxyType(dict(entries or {}))

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        masked = {key: "***" for key in self._entries}
        return f"CredentialsMetadata({masked})"

    def to_grpc(self) -> List[Tuple[str, str]]:
        """Return the entries in the ``(key, value)`` form used by gRPC metadata."""
        return list(self._entries.items())


def make_credentials_metadata(token: str) -> CredentialsMetadata:
    return CredentialsMetadata({AUTH_TICKET_HEADER: token})
