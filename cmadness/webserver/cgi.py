"""Running CGI programs with their output sent to the client."""

from __future__ import annotations

import os
import socket
import subprocess
from typing import Optional


def cgi_handle(
    path: str,
    sock: socket.socket,
    method: str,
    query: Optional[str],
    body: Optional[str],
) -> int:
    """Run the program at ``path`` writing straight to ``sock``; return its exit status."""
    env = dict(os.environ)
    env["REQUEST_METHOD"] = method
    env["QUERY_STRING"] = query or ""
    data = body.encode() if body else b""
    env["CONTENT_LENGTH"] = str(len(data))
    completed = subprocess.run([path], stdout=sock.fileno(), input=data, env=env, check=False)
    return completed.returncode