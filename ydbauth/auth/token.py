from __future__ import annotations

from ..metadata import CredentialsMetadata, make_credentials_metadata
from .base import AuthService


class TokenAuthService(AuthService):
    """Attaches a fixed token to every call."""

    def __init__(self, token: str) -> None:
        self.token = token

    async def get_auth_metadata(self) -> CredentialsMetadata:
        return make_credentials_metadata(self.token)
