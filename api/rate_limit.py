"""Sliding-window request limiter keyed by client address."""

import time
from collections import deque
from typing import Callable, Deque, Dict

from fastapi import Request

SWEEP_EVERY = 500


class RateLimited(Exception):
    """Client exceeded its request budget for the current window."""


class SlidingWindowRateLimiter:
    """Allows `max_requests` per `window_seconds` per key. In-memory, single process."""

    def __init__(
        self,
        max_requests: int = 10,
        window_seconds: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._hits: Dict[str, Deque[float]] = {}
        self._calls = 0

    def _evict(self, hits: Deque[float], now: float) -> None:
        cutoff = now - self.window_seconds
        while hits and hits[0] <= cutoff:
            hits.popleft()

    def hit(self, key: str) -> bool:
        """Record a request for `key`. False when it would exceed the limit."""
        now = self._clock()
        self._calls += 1
        if self._calls % SWEEP_EVERY == 0:
            self.sweep()

        hits = self._hits.setdefault(key, deque())
        self._evict(hits, now)
        if len(hits) >= self.max_requests:
            return False
        hits.append(now)
        return True

    def sweep(self) -> None:
        """Drop keys whose requests have all aged out of the window."""
        now = self._clock()
        for key in list(self._hits):
            hits = self._hits[key]
            self._evict(hits, now)
            if not hits:
                del self._hits[key]

    def __len__(self) -> int:
        return len(self._hits)


def client_key(request: Request) -> str:
    return request.client.host if request.client else "unknown"


async def enforce_rate_limit(request: Request) -> None:
    """FastAPI dependency: reject the request once the client is over budget."""
    limiter: SlidingWindowRateLimiter = request.app.state.rate_limiter
    if not limiter.hit(client_key(request)):
        raise RateLimited("Too many requests. Try again in a minute.")
