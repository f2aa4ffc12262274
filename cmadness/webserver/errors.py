"""Error responses, optionally with a custom HTML page."""

from __future__ import annotations

import socket

from cmadness.webserver.config import ServerConfig


def error_page(code: int, config: ServerConfig) -> bytes:
    """Return an error response, using the configured page if it can be read."""
    header = f"HTTP/1.1 {code} Error\r\nContent-Type: text/html\r\n\r\n".encode()
    try:
        with open(config.error_page, "rb") as handle:
            body = handle.read()
    except OSError:
        body = f"<h1>Error {code}</h1>".encode()
    return header + body


def send_error_page(sock: socket.socket, code: int, config: ServerConfig) -> None:
    """Send an error response on ``sock``."""
    sock.sendall(error_page(code, config))