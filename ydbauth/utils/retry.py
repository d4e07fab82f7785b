from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Optional, TypeVar

from ..constants import METADATA_MAX_TRIES, METADATA_RETRY_DELAY

T = TypeVar("T")

logger = logging.getLogger(__name__)


class RetryPolicy:
    """Fixed-delay retry with a bounded number of attempts.

    Every attempt is preceded by a sleep of ``delay`` seconds. The ``sleep``
    callable is injectable so callers can drive the loop without waiting.
    """

    def __init__(
        self,
        max_attempts: int = METADATA_MAX_TRIES,
        delay: float = METADATA_RETRY_DELAY,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        if max_attempts < 0:
            raise ValueError("max_attempts must not be negative")
        self.max_attempts = max_attempts
        self.delay = delay
        self.sleep = sleep

    async def run(self, attempt: Callable[[], Optional[T]]) -> Optional[T]:
        """Call ``attempt`` until it returns a truthy value or attempts run out."""
        for tries in range(1, self.max_attempts + 1):
            await self.sleep(self.delay)
            result = attempt()
            if result:
                return result
            logger.debug(f"Attempt {tries}/{self.max_attempts} returned no result")
        return None
