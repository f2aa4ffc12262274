"""IP allow and deny lists."""

from __future__ import annotations

from cmadness.webserver.config import ServerConfig


def access_allowed(ip: str, config: ServerConfig) -> bool:
    """Denied addresses always lose; an empty allow list admits everyone else."""
    if ip in config.deny_ips:
        return False
    if not config.allow_ips:
        return True
    return ip in config.allow_ips