"""The identifier of the current session, shared by everything it creates."""

from __future__ import annotations

import threading
import uuid

VERSION = "0.20.0"

_lock = threading.Lock()
_session_id: uuid.UUID | None = None


def session_id() -> uuid.UUID:
    """Return the session identifier, generated on first use."""
    global _session_id
    with _lock:
        if _session_id is None:
            _session_id = uuid.uuid4()
        return _session_id


def session_string() -> str:
    """Return the session identifier as a string."""
    return str(session_id())