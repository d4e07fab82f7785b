"""ydbauth: authentication metadata for YDB client calls."""

from .auth import (
    AnonymousAuthService,
    AuthService,
    IamAuthService,
    MetadataAuthService,
    TokenAuthService,
    get_auth_service,
)
from .config import AuthConfig, load_config
from .credentials import IamCredentials
from .errors import (
    AuthError,
    EmptyTokenError,
    MetadataTokenExhaustedError,
    TokenExchangeTimeoutError,
)
from .metadata import CredentialsMetadata, make_credentials_metadata

__version__ = "0.1.0"
__all__ = [
    "AnonymousAuthService",
    "AuthConfig",
    "AuthError",
    "AuthService",
    "CredentialsMetadata",
    "EmptyTokenError",
    "IamAuthService",
    "IamCredentials",
    "MetadataAuthService",
    "MetadataTokenExhaustedError",
    "TokenAuthService",
    "TokenExchangeTimeoutError",
    "get_auth_service",
    "load_config",
    "make_credentials_metadata",
]
