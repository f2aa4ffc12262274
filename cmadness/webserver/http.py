"""Static-file HTTP request handling with directory listings."""

from __future__ import annotations

import os
import socket
from typing import Mapping, Optional

from cmadness.webserver.logger import AccessLogger

DEFAULT_TYPE = "application/octet-stream"
_REASONS = {200: "OK", 404: "Not Found"}
_RECV_SIZE = 2047
_METHOD_LIMIT = 15
_URL_LIMIT = 1023


class MimeTypes:
    """A case-insensitive table from file extension to content type."""

    def __init__(self, types: Optional[Mapping[str, str]] = None) -> None:
        self._types = {ext.lower(): kind for ext, kind in (types or {}).items()}

    def load(self, path: str) -> None:
        """Add ``ext type`` lines from a file; later entries win, a missing file is ignored."""
        try:
            handle = open(path, encoding="utf-8", errors="replace")
        except OSError:
            return
        with handle:
            for line in handle:
                fields = line.split()
                if len(fields) >= 2:
                    self._types[fields[0].lower()] = fields[1]

    def type_for(self, filename: str) -> str:
        """Return the content type for ``filename`` by the text after its last dot."""
        _, dot, ext = filename.rpartition(".")
        if not dot:
            return DEFAULT_TYPE
        return self._types.get(ext.lower(), DEFAULT_TYPE)


def response_header(status: int, content_type: str, length: int) -> bytes:
    """Return a status line and headers ending with the blank line."""
    reason = _REASONS.get(status, "Error")
    return (
        f"HTTP/1.1 {status} {reason}\r\n"
        f"Content-Type: {content_type}\r\n"
        f"Content-Length: {length}\r\n\r\n"
    ).encode()


def directory_listing(path: str, url: str) -> str:
    """Return an HTML index of directory ``path`` served at ``url``.

    Raises OSError if the directory cannot be read.
    """
    names = [".", "..", *sorted(os.listdir(path))]
    separator = "" if url.endswith("/") else "/"
    items = "".join(f'<li><a href="{url}{separator}{name}">{name}</a></li>' for name in names)
    return f"<html><body><h2>Index of {url}</h2><ul>{items}</ul></body></html>"


def build_response(request: bytes, root: str, mime: MimeTypes) -> tuple[int, str, bytes]:
    """Answer a raw request; return the status, the requested URL and the response bytes."""
    tokens = request.decode("latin-1").split(maxsplit=2)
    method = tokens[0][:_METHOD_LIMIT] if tokens else ""
    url = tokens[1][:_URL_LIMIT] if len(tokens) > 1 else ""
    if method != "GET":
        return 405, url, response_header(405, "text/plain", 0)

    path = root + url
    try:
        info = os.stat(path)
    except OSError:
        return 404, url, response_header(404, "text/plain", 0)

    if os.path.isdir(path):
        try:
            body = directory_listing(path, url).encode()
        except OSError:
            return 403, url, response_header(403, "text/plain", 0)
        return 200, url, response_header(200, "text/html", len(body)) + body

    try:
        with open(path, "rb") as handle:
            content = handle.read()
    except OSError:
        return 403, url, response_header(403, "text/plain", 0)
    return 200, url, response_header(200, mime.type_for(path), info.st_size) + content


def handle_request(
    sock: socket.socket,
    root: str,
    client_ip: str,
    mime: MimeTypes,
    logger: Optional[AccessLogger],
) -> None:
    """Read one request from ``sock``, answer it and log the outcome."""
    request = sock.recv(_RECV_SIZE)
    if not request:
        return
    status, url, response = build_response(request, root, mime)
    sock.sendall(response)
    if logger is not None:
        logger.log(client_ip, url, status)