"""Errors raised while acquiring authentication metadata."""

from __future__ import annotations


class AuthError(Exception):
    """Base class for credential acquisition failures."""


class EmptyTokenError(AuthError):
    """The token exchange succeeded but returned no usable token."""

    def __init__(self, message: str = "Received empty token from IAM!") -> None:
        super().__init__(message)


class TokenExchangeTimeoutError(AuthError, TimeoutError):
    """The token exchange call did not finish within its time bound."""

    def __init__(self, timeout: float) -> None:
        self.timeout = timeout
        super().__init__(f"Timeout of {timeout}s has expired")


class MetadataTokenExhaustedError(AuthError):
    """A legacy token service produced no token after every retry."""

    def __init__(self, tries: int) -> None:
        self.tries = tries
        super().__init__(
            f"Failed to fetch access token via metadata service in {tries} tries!"
        )
