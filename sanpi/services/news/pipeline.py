"""Guard that keeps refreshes from overlapping."""

from __future__ import annotations

import threading
from typing import Callable, TypeVar

from sanpi.services.news.errors import RefreshInProgressError

T = TypeVar("T")


class RefreshGuard:
    """Runs one refresh at a time; a second caller is turned away, not queued."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    def run(self, fn: Callable[..., T], *args: object) -> T:
        if not self._lock.acquire(blocking=False):
            raise RefreshInProgressError("A refresh is already in progress")
        try:
            return fn(*args)
        finally:
            self._lock.release()


refresh_guard = RefreshGuard()
