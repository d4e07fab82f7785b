"""Authentication strategies and factory."""

from __future__ import annotations

import os
from typing import Optional

from ..config import AuthConfig, load_config
from ..credentials import IamCredentials
from ..token_service import MetadataTokenService
from .anonymous import AnonymousAuthService
from .base import AuthService
from .iam import IamAuthService
from .metadata import MetadataAuthService
from .token import TokenAuthService


def get_auth_service(
    method: Optional[str] = None, config: Optional[AuthConfig] = None
) -> AuthService:
    """Factory function to get the configured authentication strategy."""

    config = config or load_config()
    method = (method or os.getenv("YDBAUTH_METHOD") or config.method).lower()

    if method == "anonymous":
        return AnonymousAuthService()
    elif method == "token":
        if not config.token:
            raise ValueError("Token authentication requires a token")
        return TokenAuthService(config.token)
    elif method == "iam":
        iam_conf = config.iam
        if not iam_conf.service_account_key_file:
            raise ValueError("IAM authentication requires a service account key file")
        credentials = IamCredentials.from_json_file(
            iam_conf.service_account_key_file, iam_endpoint=iam_conf.iam_endpoint
        )
        return IamAuthService(
            credentials, token_request_timeout=iam_conf.token_request_timeout
        )
    elif method == "metadata":
        meta_conf = config.metadata
        return MetadataAuthService(
            MetadataTokenService(url=meta_conf.url, timeout=meta_conf.timeout)
        )
    else:
        raise ValueError(f"Unsupported auth method: {method}")


__all__ = [
    "AnonymousAuthService",
    "AuthService",
    "IamAuthService",
    "MetadataAuthService",
    "TokenAuthService",
    "get_auth_service",
]
