from __future__ import annotations

import os
from typing import Literal, Optional

import yaml
from pydantic import BaseModel

from .constants import (
    DEFAULT_IAM_ENDPOINT,
    METADATA_REQUEST_TIMEOUT,
    METADATA_TOKEN_URL,
    TOKEN_REQUEST_TIMEOUT,
)

AuthMethod = Literal["anonymous", "token", "iam", "metadata"]


class IamConfig(BaseModel):
    """Configuration for the IAM token exchange."""

    service_account_key_file: Optional[str] = None
    iam_endpoint: str = DEFAULT_IAM_ENDPOINT
    token_request_timeout: float = TOKEN_REQUEST_TIMEOUT


class MetadataConfig(BaseModel):
    """Configuration for the instance metadata token provider."""

    url: str = METADATA_TOKEN_URL
    timeout: float = METADATA_REQUEST_TIMEOUT


class AuthConfig(BaseModel):
    """Top-level configuration model."""

    method: AuthMethod = "anonymous"
    token: Optional[str] = None
    iam: IamConfig = IamConfig()
    metadata: MetadataConfig = MetadataConfig()


def load_config(path: Optional[str] = None) -> AuthConfig:
    """Load configuration from YAML file.

    Args:
        path: Optional path to config file. Falls back to YDBAUTH_CONFIG env
            variable or 'config.yaml' in the current directory.
    """

    config_path = path or os.getenv("YDBAUTH_CONFIG", "config.yaml")
    if os.path.exists(config_path):
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        config = AuthConfig(**data)
    else:
        config = AuthConfig()

    env_token = os.getenv("YDBAUTH_TOKEN")
    if env_token:
        config.token = env_token
    return config
