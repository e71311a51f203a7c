"""Image names: registries, URLs and the base images of Dockerfiles."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from urllib.parse import urlsplit

INDEX_DOCKER_IO = "https://index.docker.io/v1/"

_MAX_URL_RUNE_COUNT = 2083
_MIN_URL_RUNE_COUNT = 3

_URL_SCHEMA = r"((ftp|tcp|udp|wss?|https?):\/\/)"
_URL_USERNAME = r"(\S+(:\S*)?@)"
_URL_IP = (
    r"([1-9]\d?|1\d\d|2[01]\d|22[0-3]|24\d|25[0-5])"
    r"(\.(\d{1,2}|1\d\d|2[0-4]\d|25[0-5])){2}"
    r"(?:\.([0-9]\d?|1\d\d|2[0-4]\d|25[0-5]))"
)
_IP = (
    r"(([0-9a-fA-F]{1,4}:){7,7}[0-9a-fA-F]{1,4}|([0-9a-fA-F]{1,4}:){1,7}:"
    r"|([0-9a-fA-F]{1,4}:){1,6}:[0-9a-fA-F]{1,4}"
    r"|([0-9a-fA-F]{1,4}:){1,5}(:[0-9a-fA-F]{1,4}){1,2}"
    r"|([0-9a-fA-F]{1,4}:){1,4}(:[0-9a-fA-F]{1,4}){1,3}"
    r"|([0-9a-fA-F]{1,4}:){1,3}(:[0-9a-fA-F]{1,4}){1,4}"
    r"|([0-9a-fA-F]{1,4}:){1,2}(:[0-9a-fA-F]{1,4}){1,5}"
    r"|[0-9a-fA-F]{1,4}:((:[0-9a-fA-F]{1,4}){1,6})"
    r"|:((:[0-9a-fA-F]{1,4}){1,7}|:)"
    r"|fe80:(:[0-9a-fA-F]{0,4}){0,4}%[0-9a-zA-Z]{1,}"
    r"|::(ffff(:0{1,4}){0,1}:){0,1}((25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9])\.){3,3}"
    r"(25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9])"
    r"|([0-9a-fA-F]{1,4}:){1,4}:((25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9])\.){3,3}"
    r"(25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9]))"
)
_URL_SUBDOMAIN = r"((www\.)|([a-zA-Z0-9]+([-_\.]?[a-zA-Z0-9])*[a-zA-Z0-9]\.[a-zA-Z0-9]+))"
_URL_PATH = r"((\/|\?|#)[^\s]*)"
_URL_PORT = r"(:(\d{1,5}))"
_URL = (
    "^"
    + _URL_SCHEMA
    + "?"
    + _URL_USERNAME
    + "?"
    + "(("
    + _URL_IP
    + r"|(\["
    + _IP
    + r"\])|(([a-zA-Z0-9]([a-zA-Z0-9-_]+)?[a-zA-Z0-9]([-\.][a-zA-Z0-9]+)*)|("
    + _URL_SUBDOMAIN
    + r"?))?(([a-zA-Z\u00a1-\uffff0-9]+-?-?)*[a-zA-Z\u00a1-\uffff0-9]+)"
    + r"(?:\.([a-zA-Z\u00a1-\uffff]{1,}))?))\.?"
    + _URL_PORT
    + "?"
    + _URL_PATH
    + r"?\Z"
)

_URL_RE = re.compile(_URL, re.ASCII)
_IMAGE_RE = re.compile(
    r"^(?:(?P<registry>(https?://)?[^/]+)(?::(?P<port>\d+))?/)?"
    r"(?:(?P<repository>[^/]+)/)?(?P<image>[^:]+)(?::(?P<tag>.+))?\Z"
)


def extract_images_from_dockerfile(
    dockerfile: str | os.PathLike, build_args: Mapping[str, str | None] | None
) -> list[str]:
    """Return the image of every FROM line, with ``${ARG}`` references interpolated."""
    images = []
    with open(dockerfile, encoding="utf-8") as file:
        for raw_line in file:
            line = raw_line.strip()
            if not line.upper().startswith("FROM"):
                continue

            line = line.removeprefix("FROM")
            image = line.strip().split(" ")[0]
            for key, value in (build_args or {}).items():
                if value is not None:
                    image = image.replace("${" + key + "}", value)
            images.append(image)
    return images


def extract_registry(image: str, fallback: str) -> str:
    """Return the registry named in ``image``, or ``fallback`` if it names none.

    An empty string is returned when ``image`` is not an image reference at all.
    """
    match = _IMAGE_RE.match(image)
    if match is None:
        return ""

    registry = match.group("registry") or ""
    if is_url(registry):
        return registry
    return fallback


def is_url(value: str) -> bool:
    """Return whether ``value`` is a URL, a host name or an IP address, with optional port."""
    if (
        not value
        or len(value) >= _MAX_URL_RUNE_COUNT
        or len(value.encode("utf-8")) <= _MIN_URL_RUNE_COUNT
        or value.startswith(".")
    ):
        return False

    candidate = value
    if ":" in value and "://" not in value:
        candidate = "http://" + value

    try:
        parts = urlsplit(candidate)
        parts.port
    except ValueError:
        return False

    host = parts.netloc.rpartition("@")[2]
    if host.startswith("."):
        return False
    if not host and parts.path and "." not in parts.path:
        return False
    return _URL_RE.match(value) is not None