"""Recognition session lifecycle states."""

from __future__ import annotations

import enum


class SessionState(enum.Enum):
    """Lifecycle of one client connection's upstream recognition stream.

    IDLE: no writable upstream stream (one may be starting).
    STREAMING: upstream stream open and accepting audio.
    CLOSING: upstream write side half-closed; results still draining.
    TERMINATED: upstream stream torn down and released.
    """

    IDLE = "idle"
    STREAMING = "streaming"
    CLOSING = "closing"
    TERMINATED = "terminated"


__all__ = ["SessionState"]
