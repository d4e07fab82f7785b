from __future__ import annotations

from ..metadata import CredentialsMetadata
from .base import AuthService


class AnonymousAuthService(AuthService):
    """Sends calls without credentials."""

    async def get_auth_metadata(self) -> CredentialsMetadata:
        return CredentialsMetadata()
