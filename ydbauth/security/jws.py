"""JWT assertion signing for the IAM token exchange."""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Dict, Optional

import jwt

from ..clock import Clock, SystemClock
from ..constants import IAM_TOKEN_AUDIENCE, JWT_EXPIRATION_TIMEOUT
from ..credentials import IamCredentials


class JwtSigner:
    """Builds short-lived assertions signed with a service account key.

    Assertions are PS256 (RSA-PSS with SHA-256) JWTs whose ``kid`` header
    names the access key, issued by the service account and addressed to the
    IAM token endpoint.
    """

    algorithm = "PS256"

    def __init__(
        self,
        credentials: IamCredentials,
        clock: Optional[Clock] = None,
        expiration_timeout: int = JWT_EXPIRATION_TIMEOUT,
    ) -> None:
        self.credentials = credentials
        self.clock = clock or SystemClock()
        self.expiration_timeout = expiration_timeout

    def claims(self) -> Dict[str, Any]:
        now = self.clock.now()
        expires = now + timedelta(seconds=self.expiration_timeout)
        return {
            "iss": self.credentials.service_account_id,
            "aud": IAM_TOKEN_AUDIENCE,
            "iat": round(now.timestamp()),
            "exp": round(expires.timestamp()),
        }

    def sign(self) -> str:
        """Return a freshly signed assertion."""
        return jwt.encode(
            self.claims(),
            self.credentials.private_key,
            algorithm=self.algorithm,
            headers={"kid": self.credentials.access_key_id},
        )
