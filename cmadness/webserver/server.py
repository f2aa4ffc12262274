"""Threaded TCP server that answers each connection with one HTTP response."""

from __future__ import annotations

import socket
import threading
from typing import Optional

from cmadness.webserver.http import MimeTypes, handle_request
from cmadness.webserver.logger import AccessLogger
from cmadness.webserver.shutdown import ShutdownState

_BACKLOG = 64
_POLL_INTERVAL = 0.5


def handle_client(
    sock: socket.socket,
    address: tuple,
    root: str,
    mime: MimeTypes,
    logger: Optional[AccessLogger],
) -> None:
    """Serve one request from a connected client, then close the connection."""
    with sock:
        handle_request(sock, root, address[0], mime, logger)


def serve(
    port: int,
    root: str,
    mime: Optional[MimeTypes] = None,
    logger: Optional[AccessLogger] = None,
    state: Optional[ShutdownState] = None,
) -> None:
    """Listen on all addresses at ``port`` until ``state`` asks to stop (forever if None)."""
    mime = mime if mime is not None else MimeTypes()
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
        listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        listener.bind(("", port))
        listener.listen(_BACKLOG)
        listener.settimeout(_POLL_INTERVAL)
        print(f"Serving {root} on port {port}", flush=True)
        while state is None or state.running:
            try:
                conn, address = listener.accept()
            except socket.timeout:
                continue
            threading.Thread(
                target=handle_client,
                args=(conn, address, root, mime, logger),
                daemon=True,
            ).start()