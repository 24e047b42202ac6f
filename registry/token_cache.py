import time
from typing import Callable, Optional


class ServiceTokenCache:
    """Holds the service account's registry token until it expires.

    Shared by every request in the process. Concurrent refreshes may race;
    the last write wins.
    """

    def __init__(self, ttl_seconds: float = 3600.0, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._token: Optional[str] = None
        self._expires_at: float = 0.0

    def get(self) -> Optional[str]:
        """Cached token, or None when empty or expired."""
        if self._token is None:
            return None
        if self._clock() >= self._expires_at:
            self.clear()
            return None
        return self._token

    def set(self, token: str) -> None:
        self._token = token
        self._expires_at = self._clock() + self.ttl_seconds

    def clear(self) -> None:
        self._token = None
        self._expires_at = 0.0
