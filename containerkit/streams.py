"""Container log messages and the multiplexed output stream format."""

from __future__ import annotations

import io
import struct
from collections.abc import Callable
from dataclasses import dataclass
from typing import BinaryIO, Protocol, runtime_checkable

STDOUT_LOG = "STDOUT"
STDERR_LOG = "STDERR"

_HEADER = struct.Struct(">B3xI")
_STDIN = 0
_STDOUT = 1
_STDERR = 2
_SYSTEMERR = 3


@dataclass(frozen=True)
class Log:
    """A message written by a process; ``log_type`` is STDOUT or STDERR."""

    log_type: str
    content: bytes


@runtime_checkable
class LogConsumer(Protocol):
    """Anything that can handle a log message."""

    def accept(self, log: Log) -> None:
        """Handle one log message."""


@dataclass
class ProcessOptions:
    """Options applied to the reader returned by a command execution."""

    reader: BinaryIO


def _read_exact(reader: BinaryIO, size: int) -> bytes:
    chunks = bytearray()
    while len(chunks) < size:
        chunk = reader.read(size - len(chunks))
        if not chunk:
            break
        chunks += chunk
    return bytes(chunks)


def demultiplex(reader: BinaryIO) -> tuple[bytes, bytes]:
    """Split a multiplexed stream into its standard output and standard error parts.

    An incomplete trailing frame is dropped. A daemon error frame or an unknown
    stream type raises ``ValueError``.
    """
    out = bytearray()
    err = bytearray()
    while True:
        header = _read_exact(reader, _HEADER.size)
        if len(header) < _HEADER.size:
            break
        stream, size = _HEADER.unpack(header)
        if stream in (_STDIN, _STDOUT):
            target = out
        elif stream == _STDERR:
            target = err
        elif stream == _SYSTEMERR:
            target = None
        else:
            raise ValueError(f"Unrecognized input header: {stream}")

        payload = _read_exact(reader, size)
        if len(payload) < size:
            break
        if target is None:
            message = payload.decode("utf-8", errors="replace")
            raise ValueError(f"error from daemon in stream: {message}")
        target += payload
    return bytes(out), bytes(err)


def multiplexed() -> Callable[[ProcessOptions], None]:
    """Return an option that replaces the reader with the demultiplexed standard output."""

    def apply(options: ProcessOptions) -> None:
        stdout, _ = demultiplex(options.reader)
        options.reader = io.BytesIO(stdout)

    return apply