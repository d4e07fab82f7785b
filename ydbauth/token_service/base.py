"""Token provider contracts consumed by the metadata auth service."""

from __future__ import annotations

import abc
from typing import Optional, Protocol, runtime_checkable


class TokenService(metaclass=abc.ABCMeta):
    """Provider that fetches an access token asynchronously."""

    @abc.abstractmethod
    async def get_token(self) -> str:
        """Return a usable access token or raise."""
        raise NotImplementedError


@runtime_checkable
class CompatTokenService(Protocol):
    """Older poll-based provider.

    ``get_token`` returns the token it currently holds, or nothing while it is
    still loading. Providers may also expose an async ``initialize()`` that
    loads the first token.
    """

    def get_token(self) -> Optional[str]:
        ...
