"""Fixed pacing between provider calls.

The delays keep a batch run under the provider's rate limit. They are fixed spacings, not
adaptive backoff.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable

from docsagent.logging import get_logger

logger = get_logger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class FixedDelayPacer:
    def __init__(
        self,
        *,
        after_outline_s: float = 2.0,
        between_sections_s: float = 3.0,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self.after_outline_s = after_outline_s
        self.between_sections_s = between_sections_s
        self._sleep = sleep

    async def after_outline(self) -> None:
        await self._pause(self.after_outline_s)

    async def between_sections(self) -> None:
        logger.info("Waiting %.1fs before next section", self.between_sections_s)
        await self._pause(self.between_sections_s)

    async def _pause(self, seconds: float) -> None:
        if seconds > 0:
            await self._sleep(seconds)
