"""Adapter from poll-based token providers to :class:`TokenService`."""

from __future__ import annotations

import inspect
import logging
from typing import Optional

from ..errors import MetadataTokenExhaustedError
from ..utils.retry import RetryPolicy
from .base import CompatTokenService, TokenService

logger = logging.getLogger(__name__)


class CompatTokenServiceAdapter(TokenService):
    """Wraps a :class:`CompatTokenService`.

    The provider is asked directly first. When it has no token, its
    ``initialize()`` is awaited once if it has one, then the getter is polled
    under ``retry`` until a token shows up or the attempts run out.
    """

    def __init__(
        self, service: CompatTokenService, retry: Optional[RetryPolicy] = None
    ) -> None:
        self.service = service
        self.retry = retry or RetryPolicy()
        initialize = getattr(service, "initialize", None)
        self._initialize = initialize if callable(initialize) else None

    def _poll(self) -> Optional[str]:
        token = self.service.get_token()
        if token is None or isinstance(token, str):
            return token
        if inspect.iscoroutine(token):
            token.close()
        raise TypeError(
            f"Token service returned {type(token).__name__}, expected str or None"
        )

    async def get_token(self) -> str:
        token = self._poll()
        if token:
            return token

        if self._initialize is not None:
            logger.debug("Token service has no token yet, initializing")
            await self._initialize()
            token = self._poll()
            if token:
                return token

        logger.warning(
            f"Token service returned no token, polling up to {self.retry.max_attempts} times"
        )
        token = await self.retry.run(self._poll)
        if token:
            return token
        raise MetadataTokenExhaustedError(self.retry.max_attempts)
