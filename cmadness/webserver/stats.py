"""Request counters reported as JSON."""

from __future__ import annotations

import json
import threading


class RequestStats:
    """Counts requests; safe to share between threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.total_requests = 0

    def increment(self, ip: str, uri: str) -> None:
        """Record one request."""
        with self._lock:
            self.total_requests += 1

    def dump_json(self) -> bytes:
        """Return an HTTP response holding the counters as JSON."""
        with self._lock:
            body = json.dumps({"total_requests": self.total_requests}, separators=(",", ":"))
        return ("HTTP/1.1 200 OK\r\nContent-Type: application/json\r\n\r\n" + body).encode()