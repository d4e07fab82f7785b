"""Clients that exchange signed assertions for IAM tokens."""

from __future__ import annotations

import abc
import logging
from datetime import datetime
from typing import Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field

from ..constants import DEFAULT_IAM_ENDPOINT

logger = logging.getLogger(__name__)

IAM_TOKENS_PATH = "/iam/v1/tokens"


class CreateIamTokenResponse(BaseModel):
    """Result of a token exchange. ``iam_token`` may come back empty."""

    model_config = ConfigDict(populate_by_name=True)

    iam_token: str = Field(default="", alias="iamToken")
    expires_at: Optional[datetime] = Field(default=None, alias="expiresAt")


class TokenExchanger(metaclass=abc.ABCMeta):
    """Converts a signed assertion into a short-lived access token."""

    @abc.abstractmethod
    async def create(self, jwt: str) -> CreateIamTokenResponse:
        """Submit ``jwt`` to the exchange endpoint."""
        raise NotImplementedError


def tokens_url(endpoint: str) -> str:
    """Resolve an IAM endpoint address into the token resource URL.

    A bare ``host[:port]`` address maps to ``https://host/iam/v1/tokens``;
    anything with a scheme is used unchanged.
    """
    if "://" in endpoint:
        return endpoint
    host, _, port = endpoint.partition(":")
    if port and port != "443":
        host = f"{host}:{port}"
    return f"https://{host}{IAM_TOKENS_PATH}"


class HttpTokenExchanger(TokenExchanger):
    """Token exchange over the IAM REST API.

    Requests carry no httpx timeout; the caller bounds the exchange.
    """

    def __init__(
        self,
        endpoint: str = DEFAULT_IAM_ENDPOINT,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.url = tokens_url(endpoint)
        self._client = client

    async def create(self, jwt: str) -> CreateIamTokenResponse:
        logger.debug(f"Requesting IAM token from {self.url}")
        if self._client is not None:
            resp = await self._client.post(self.url, json={"jwt": jwt}, timeout=None)
        else:
            async with httpx.AsyncClient(timeout=None) as client:
                resp = await client.post(self.url, json={"jwt": jwt})
        resp.raise_for_status()
        return CreateIamTokenResponse.model_validate(resp.json())
