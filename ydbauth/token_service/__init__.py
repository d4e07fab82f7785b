"""Access token providers."""

from __future__ import annotations

from .base import CompatTokenService, TokenService
from .compat import CompatTokenServiceAdapter
from .metadata import MetadataTokenService

__all__ = [
    "CompatTokenService",
    "CompatTokenServiceAdapter",
    "MetadataTokenService",
    "TokenService",
]
