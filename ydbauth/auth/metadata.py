"""Authentication with a token from a local token provider."""

from __future__ import annotations

import inspect
from typing import Optional, Union

from ..metadata import CredentialsMetadata, make_credentials_metadata
from ..token_service import (
    CompatTokenService,
    CompatTokenServiceAdapter,
    MetadataTokenService,
    TokenService,
)
from ..utils.retry import RetryPolicy
from .base import AuthService


class MetadataAuthService(AuthService):
    """Attaches the token returned by a token provider.

    A :class:`TokenService`, or any provider whose ``get_token`` is a
    coroutine function, is awaited directly and its errors propagate
    unchanged. Any other provider is treated as a poll-based
    :class:`CompatTokenService` and wrapped once, here, in
    :class:`CompatTokenServiceAdapter`. Without a provider the instance
    metadata service is used.
    """

    def __init__(
        self,
        token_service: Optional[Union[TokenService, CompatTokenService]] = None,
        retry: Optional[RetryPolicy] = None,
    ) -> None:
        if token_service is None:
            token_service = MetadataTokenService()
        if isinstance(token_service, TokenService) or inspect.iscoroutinefunction(
            getattr(token_service, "get_token", None)
        ):
            self.token_service: TokenService = token_service  # type: ignore[assignment]
        else:
            self.token_service = CompatTokenServiceAdapter(token_service, retry=retry)

    async def get_auth_metadata(self) -> CredentialsMetadata:
        token = await self.token_service.get_token()
        return make_credentials_metadata(token)
