"""Building blocks for container-backed integration tests: archives, image parsing, Docker host detection, log streams and session identifiers."""

__version__ = "0.20.0"