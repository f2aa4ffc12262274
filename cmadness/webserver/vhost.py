"""Virtual host lookup."""

from __future__ import annotations

from typing import Optional

from cmadness.webserver.config import ServerConfig


def vhost_root_for(host: str, config: ServerConfig) -> Optional[str]:
    """Return the document root of the first virtual host named ``host``, or None."""
    return next((vhost.root for vhost in config.vhosts if vhost.domain == host), None)