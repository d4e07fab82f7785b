"""Token provider backed by the local instance metadata service."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Optional

import httpx
from pydantic import BaseModel

from ..clock import Clock, SystemClock
from ..constants import (
    METADATA_FALLBACK_TOKEN_LIFETIME,
    METADATA_REFRESH_MARGIN,
    METADATA_REQUEST_TIMEOUT,
    METADATA_TOKEN_URL,
)
from ..errors import EmptyTokenError
from .base import TokenService

logger = logging.getLogger(__name__)


class MetadataTokenResponse(BaseModel):
    access_token: str = ""
    expires_in: Optional[int] = None
    token_type: str = "Bearer"


class MetadataTokenService(TokenService):
    """Fetches and caches the instance service account token.

    The cached token is reused until ``refresh_margin`` seconds before the
    expiry reported by the metadata service.
    """

    def __init__(
        self,
        url: str = METADATA_TOKEN_URL,
        timeout: float = METADATA_REQUEST_TIMEOUT,
        clock: Optional[Clock] = None,
        client: Optional[httpx.AsyncClient] = None,
        refresh_margin: int = METADATA_REFRESH_MARGIN,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.clock = clock or SystemClock()
        self.refresh_margin = timedelta(seconds=refresh_margin)
        self._client = client
        self._token: Optional[str] = None
        self._expires_at: Optional[datetime] = None

    @property
    def expired(self) -> bool:
        if not self._token or self._expires_at is None:
            return True
        return self.clock.now() >= self._expires_at - self.refresh_margin

    async def _fetch(self) -> MetadataTokenResponse:
        headers = {"Metadata-Flavor": "Google"}
        if self._client is not None:
            resp = await self._client.get(self.url, headers=headers, timeout=self.timeout)
        else:
            async with httpx.AsyncClient() as client:
                resp = await client.get(self.url, headers=headers, timeout=self.timeout)
        resp.raise_for_status()
        return MetadataTokenResponse.model_validate(resp.json())

    async def get_token(self) -> str:
        if not self.expired:
            return self._token  # type: ignore[return-value]

        data = await self._fetch()
        if not data.access_token:
            raise EmptyTokenError("Received empty token from metadata service!")
        lifetime = data.expires_in
        if not lifetime or lifetime <= 0:
            logger.warning(
                f"Metadata token response has no usable expires_in ({lifetime}), "
                f"caching for {METADATA_FALLBACK_TOKEN_LIFETIME}s"
            )
            lifetime = METADATA_FALLBACK_TOKEN_LIFETIME
        self._token = data.access_token
        self._expires_at = self.clock.now() + timedelta(seconds=lifetime)
        logger.info(f"Fetched metadata token valid for {lifetime}s")
        return self._token
