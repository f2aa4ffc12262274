"""Per-address request rate limiting over a fixed time window."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable

RATE_LIMIT = 100
TIME_WINDOW = 60


@dataclass
class _Entry:
    count: int
    window_start: float


class RateLimiter:
    """Allows at most ``limit`` requests per address in each window."""

    def __init__(
        self,
        limit: int = RATE_LIMIT,
        window: float = TIME_WINDOW,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.limit = limit
        self.window = window
        self._clock = clock
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def check(self, ip: str) -> bool:
        """Count a request from ``ip``; return False if it exceeds the limit."""
        now = self._clock()
        with self._lock:
            entry = self._entries.get(ip)
            if entry is None:
                self._entries[ip] = _Entry(1, now)
                return True
            if now - entry.window_start > self.window:
                entry.count = 1
                entry.window_start = now
                return True
            entry.count += 1
            return entry.count <= self.limit

    def cleanup(self) -> None:
        """Forget addresses whose window has expired."""
        now = self._clock()
        with self._lock:
            self._entries = {
                ip: entry
                for ip, entry in self._entries.items()
                if now - entry.window_start <= self.window
            }