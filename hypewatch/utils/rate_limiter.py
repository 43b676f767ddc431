from __future__ import annotations

import time
from typing import Callable

from .logging import get_logger

logger = get_logger("hw.rate_limiter")


class RequestPacer:
    """Fixed delay between live language-model calls.

    The orchestrator calls ``pause()`` after each analysis that reached the
    provider; cache hits never pause. ``sleep`` is injectable for tests.
    """

    def __init__(self, delay_ms: int, *, sleep: Callable[[float], None] = time.sleep) -> None:
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got {delay_ms}")
        self.delay_ms = delay_ms
        self._sleep = sleep
        self.pauses = 0

    def pause(self) -> None:
        if self.delay_ms == 0:
            return
        logger.info("Waiting %dms to respect API limits...", self.delay_ms)
        self._sleep(self.delay_ms / 1000.0)
        self.pauses += 1
