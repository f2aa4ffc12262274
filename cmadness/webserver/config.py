"""Server configuration and a minimal ``key = value`` file reader."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable

MAX_VHOSTS = 16
_IP_LIMIT = 63
_PATH_LIMIT = 255


@dataclass
class VirtualHost:
    """A name-based virtual host."""

    domain: str
    port: int = 0
    root: str = ""
    cert_file: str = ""
    key_file: str = ""


@dataclass
class ServerConfig:
    """Settings shared by the whole server."""

    listen_port: int = 0
    listen_ip: str = ""
    logfile: str = ""
    error_page: str = ""
    max_clients: int = 0
    allow_ips: list[str] = field(default_factory=list)
    deny_ips: list[str] = field(default_factory=list)
    vhosts: list[VirtualHost] = field(default_factory=list)


def _limited(limit: int) -> Callable[[str], str]:
    return lambda value: value[:limit]


_SETTINGS: tuple[tuple[str, re.Pattern[str], Callable[[str], object]], ...] = (
    ("listen_port", re.compile(r"listen_port\s*=\s*([+-]?\d+)"), int),
    ("listen_ip", re.compile(r"listen_ip\s*=\s*(\S+)"), _limited(_IP_LIMIT)),
    ("logfile", re.compile(r"logfile\s*=\s*(\S+)"), _limited(_PATH_LIMIT)),
    ("error_page", re.compile(r"error_page\s*=\s*(\S+)"), _limited(_PATH_LIMIT)),
)


def load_config(path: str) -> ServerConfig:
    """Read settings from ``path``; unknown lines are ignored.

    Raises OSError if the file cannot be opened.
    """
    values: dict[str, object] = {}
    with open(path, encoding="utf-8", errors="replace") as handle:
        for line in handle:
            for name, pattern, convert in _SETTINGS:
                match = pattern.match(line)
                if match:
                    values[name] = convert(match.group(1))
                    break
    return ServerConfig(**values)