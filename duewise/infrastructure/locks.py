"""Advisory locks preventing overlapping runs of scheduled jobs."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from uuid import uuid4

logger = logging.getLogger(__name__)


class SweepLock:
    """Process-wide lock keyed by name that expires after ``ttl_seconds``.

    Expiry lets a crashed or cancelled run stop blocking later ones. Each
    acquisition gets its own token so a holder whose lease expired cannot
    release the lock taken over by the next run.
    """

    def __init__(self, name: str, *, clock: Callable[[], float] = time.monotonic) -> None:
        self.name = name
        self._clock = clock
        self._guard = threading.Lock()
        self._expires_at: float | None = None
        self._token: str | None = None

    @property
    def held(self) -> bool:
        with self._guard:
            return self._expires_at is not None and self._expires_at > self._clock()

    def acquire(self, ttl_seconds: float) -> str | None:
        """Take the lock and return its token, or ``None`` if it is still held."""

        with self._guard:
            now = self._clock()
            if self._expires_at is not None and self._expires_at > now:
                return None
            if self._expires_at is not None:
                logger.warning("Lock %s expired before being released", self.name)
            self._expires_at = now + ttl_seconds
            self._token = uuid4().hex
            return self._token

    def release(self, token: str) -> bool:
        """Release the lock if ``token`` still owns it."""

        with self._guard:
            if token != self._token:
                logger.warning("Lock %s was taken over; not releasing", self.name)
                return False
            self._expires_at = None
            self._token = None
            return True

    @contextmanager
    def hold(self, ttl_seconds: float) -> Iterator[bool]:
        """Yield whether the lock was acquired, releasing it afterwards."""

        token = self.acquire(ttl_seconds)
        try:
            yield token is not None
        finally:
            if token is not None:
                self.release(token)


due_reminder_lock = SweepLock("due-reminder-sweep")

__all__ = ["SweepLock", "due_reminder_lock"]
