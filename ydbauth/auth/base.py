"""Base interface for authentication strategies."""

from __future__ import annotations

import abc

from ..metadata import CredentialsMetadata


class AuthService(metaclass=abc.ABCMeta):
    """Produces the credentials attached to every outgoing call.

    Implementations must tolerate repeated and concurrent calls.
    """

    @abc.abstractmethod
    async def get_auth_metadata(self) -> CredentialsMetadata:
        """Return the attachment for the next call."""
        raise NotImplementedError
