"""HTTP Basic authentication against a single built-in account."""

from __future__ import annotations

import base64
import binascii
import hmac
import socket

_VALID_USER = "admin"
_VALID_PASSWORD = "password"
_CREDENTIALS = f"{_VALID_USER}:{_VALID_PASSWORD}".encode()
_SCHEME = "Basic "


def auth_check(auth_header: str | None, realm: str = "") -> bool:
    """Return True if the Authorization header carries the accepted credentials."""
    if not auth_header or not auth_header.startswith(_SCHEME):
        return False
    try:
        decoded = base64.b64decode(auth_header[len(_SCHEME):], validate=True)
    except (binascii.Error, ValueError):
        return False
    return hmac.compare_digest(decoded, _CREDENTIALS)


def challenge_response(realm: str) -> bytes:
    """Return the 401 response asking the client to authenticate."""
    return (
        "HTTP/1.1 401 Unauthorized\r\n"
        f'WWW-Authenticate: Basic realm="{realm}"\r\n\r\n'
    ).encode()


def send_challenge(sock: socket.socket, realm: str) -> None:
    """Send the authentication challenge on ``sock``."""
    sock.sendall(challenge_response(realm))