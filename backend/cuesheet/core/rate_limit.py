"""
Sliding-window throttling for signup and login.

Each client address gets at most `calls` attempts per `period` seconds.
"""

import time
from collections import deque
from typing import Callable, Deque, Dict

from cuesheet.core.config import settings


class RateLimiter:
    def __init__(self, calls: int, period: float, clock: Callable[[], float] = time.monotonic) -> None:
        self.calls = calls
        self.period = period
        self._clock = clock
        self._buckets: Dict[str, Deque[float]] = {}
        self._last_sweep = clock()

    def __len__(self) -> int:
        return len(self._buckets)

    def hit(self, key: str) -> int | None:
        """Record an attempt; return seconds until retry if the key is over its limit."""
        now = self._clock()
        if now - self._last_sweep >= self.period:
            self._sweep(now)

        bucket = self._buckets.setdefault(key, deque())
        self._prune(bucket, now)

        if len(bucket) >= self.calls:
            return max(1, int(self.period - (now - bucket[0])))

        bucket.append(now)
        return None

    def reset(self) -> None:
        self._buckets.clear()

    def _prune(self, bucket: Deque[float], now: float) -> None:
        # Remove timestamps outside the window
        while bucket and bucket[0] <= now - self.period:
            bucket.popleft()

    def _sweep(self, now: float) -> None:
        """Drop addresses with no attempts left in the window."""
        for key in list(self._buckets):
            bucket = self._buckets[key]
            self._prune(bucket, now)
            if not bucket:
                del self._buckets[key]
        self._last_sweep = now


login_limiter = RateLimiter(settings.LOGIN_RATE_LIMIT_CALLS, settings.LOGIN_RATE_LIMIT_PERIOD)
