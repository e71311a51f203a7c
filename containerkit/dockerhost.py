"""Locating the Docker daemon socket and detecting container environments."""

from __future__ import annotations

import os
import subprocess
from urllib.parse import unquote, urlsplit

LABEL_BASE = "org.testcontainers"
LABEL_LANG = LABEL_BASE + ".lang"
LABEL_REAPER = LABEL_BASE + ".reaper"
LABEL_SESSION_ID = LABEL_BASE + ".sessionId"
LABEL_VERSION = LABEL_BASE + ".version"

SOCKET_OVERRIDE_ENV = "TESTCONTAINERS_DOCKER_SOCKET_OVERRIDE"
DEFAULT_DOCKER_SOCKET = "/var/run/docker.sock"
DOCKERENV_PATH = "/.dockerenv"


def default_gateway_ip() -> str:
    """Return the IP address of the default network gateway.

    Raises ``RuntimeError`` when it cannot be detected.
    """
    try:
        result = subprocess.run(
            ["sh", "-c", "ip route|awk '/default/ { print $3 }'"],
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        raise RuntimeError("failed to detect docker host") from exc

    ip = result.stdout.strip()
    if not ip:
        raise RuntimeError("failed to parse default gateway IP")
    return ip


def extract_docker_host(docker_host: str | None = None) -> str:
    """Return the Docker socket path.

    The override environment variable wins; otherwise a ``unix://`` URL in
    ``docker_host`` gives the path; anything else yields the default socket.
    """
    override = os.environ.get(SOCKET_OVERRIDE_ENV)
    if override:
        return override

    if not docker_host:
        return DEFAULT_DOCKER_SOCKET

    try:
        parts = urlsplit(docker_host)
    except ValueError:
        return DEFAULT_DOCKER_SOCKET

    if parts.scheme == "unix":
        return unquote(parts.path)
    return DEFAULT_DOCKER_SOCKET


def in_a_container(path: str | os.PathLike = DOCKERENV_PATH) -> bool:
    """Return whether the marker file that Docker creates inside containers exists."""
    return os.path.exists(path)