"""IAM token exchange authentication."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timedelta
from typing import Optional

from ..clock import Clock, SystemClock
from ..constants import TOKEN_EXPIRATION_TIMEOUT, TOKEN_REQUEST_TIMEOUT
from ..credentials import IamCredentials
from ..errors import EmptyTokenError, TokenExchangeTimeoutError
from ..metadata import CredentialsMetadata, make_credentials_metadata
from ..security.jws import JwtSigner
from ..security.tokens import CreateIamTokenResponse, HttpTokenExchanger, TokenExchanger
from .base import AuthService

logger = logging.getLogger(__name__)


class IamAuthService(AuthService):
    """Exchanges a signed service account assertion for an IAM token.

    The IAM token is cached for ``token_expiration_timeout`` seconds, far less
    than the token's own lifetime, after which the next call performs a new
    exchange. Concurrent callers that find the cache expired each run their
    own exchange; the last one to finish wins the cache.
    """

    def __init__(
        self,
        credentials: IamCredentials,
        exchanger: Optional[TokenExchanger] = None,
        clock: Optional[Clock] = None,
        token_request_timeout: float = TOKEN_REQUEST_TIMEOUT,
        token_expiration_timeout: float = TOKEN_EXPIRATION_TIMEOUT,
    ) -> None:
        self.credentials = credentials
        self.clock = clock or SystemClock()
        self.signer = JwtSigner(credentials, clock=self.clock)
        self.exchanger = exchanger or HttpTokenExchanger(credentials.iam_endpoint)
        self.token_request_timeout = token_request_timeout
        self.token_expiration_timeout = timedelta(seconds=token_expiration_timeout)
        self.token = ""
        self.token_timestamp: Optional[datetime] = None

    @property
    def expired(self) -> bool:
        if self.token_timestamp is None:
            return True
        return self.clock.now() - self.token_timestamp > self.token_expiration_timeout

    async def _send_token_request(self) -> CreateIamTokenResponse:
        request = self.exchanger.create(self.signer.sign())
        try:
            return await asyncio.wait_for(request, timeout=self.token_request_timeout)
        except asyncio.TimeoutError as exc:
            raise TokenExchangeTimeoutError(self.token_request_timeout) from exc

    async def update_token(self) -> None:
        response = await self._send_token_request()
        if not response.iam_token:
            logger.warning(
                f"IAM returned an empty token for service account {self.credentials.service_account_id}"
            )
            raise EmptyTokenError()
        self.token = response.iam_token
        self.token_timestamp = self.clock.now()
        logger.info(
            f"Refreshed IAM token for service account {self.credentials.service_account_id}"
        )

    async def get_auth_metadata(self) -> CredentialsMetadata:
        if self.expired:
            await self.update_token()
        else:
            logger.debug("Using cached IAM token")
        return make_credentials_metadata(self.token)
