"""Command that serves a directory over HTTP."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence

from cmadness.webserver.http import MimeTypes
from cmadness.webserver.logger import AccessLogger
from cmadness.webserver.server import serve
from cmadness.webserver.shutdown import ShutdownState, install_signal_handlers

LOG_FILE = "server.log"
MIME_FILE = "mime.types"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Serve ``<web_root>`` on ``<port>``; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    program = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "cmadness-web"
    usage = f"Usage: {program} <port> <web_root>"
    if len(args) < 2:
        print(usage)
        return 1
    try:
        port = int(args[0])
    except ValueError:
        print(usage)
        return 1
    root = args[1]

    mime = MimeTypes()
    mime.load(MIME_FILE)
    state = ShutdownState()
    install_signal_handlers(state)
    with AccessLogger(LOG_FILE) as logger:
        serve(port, root, mime, logger, state)
    return 0