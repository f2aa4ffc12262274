"""Graceful shutdown on SIGINT and SIGTERM."""

from __future__ import annotations

import signal
from typing import Any


class ShutdownState:
    """A flag cleared when the server should stop."""

    def __init__(self) -> None:
        self.running = True

    def request_stop(self, *args: Any) -> None:
        """Ask the server to stop; usable directly as a signal handler."""
        self.running = False


def install_signal_handlers(state: ShutdownState) -> dict[int, Any]:
    """Make SIGINT and SIGTERM stop the server; return the previous handlers."""
    previous = {}
    for signum in (signal.SIGINT, signal.SIGTERM):
        previous[signum] = signal.signal(signum, state.request_stop)
    return previous