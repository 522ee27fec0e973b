"""Shared test client configuration."""

from __future__ import annotations

from .websocket import WS_PING_TIMEOUT_S, WS_PING_INTERVAL_S, WS_RECV_IDLE_TIMEOUT_S
from .audio import (
    CHUNK_MS,
    FILE_EXTS,
    MIN_SLEEP_S,
    SAMPLE_BYTES,
    CHUNK_SAMPLES,
    SAMPLES_DIR_NAME,
    CLIENT_SAMPLE_RATE,
)

__all__ = [
    "CHUNK_MS",
    "CHUNK_SAMPLES",
    "CLIENT_SAMPLE_RATE",
    "FILE_EXTS",
    "MIN_SLEEP_S",
    "SAMPLES_DIR_NAME",
    "SAMPLE_BYTES",
    "WS_PING_INTERVAL_S",
    "WS_PING_TIMEOUT_S",
    "WS_RECV_IDLE_TIMEOUT_S",
]
