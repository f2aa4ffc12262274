"""Thread-safe access log."""

from __future__ import annotations

import threading
from datetime import datetime
from typing import Callable, Optional, TextIO


class AccessLogger:
    """Appends one line per request to a file.

    If the file cannot be opened, logging is silently disabled.
    """

    def __init__(self, path: str, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._file: Optional[TextIO]
        try:
            self._file = open(path, "a", encoding="utf-8")
        except OSError:
            self._file = None

    def log(self, ip: str, path: str, status: int) -> None:
        """Write a line for a request from ``ip`` for ``path``."""
        with self._lock:
            if self._file is None:
                return
            stamp = self._clock().strftime("%Y-%m-%d %H:%M:%S")
            self._file.write(f'[{stamp}] {ip} "{path}" {status}\n')
            self._file.flush()

    def close(self) -> None:
        """Close the log file; later calls to log do nothing."""
        with self._lock:
            if self._file is not None:
                self._file.close()
                self._file = None

    def __enter__(self) -> "AccessLogger":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()