"""Audio and sample defaults for client scripts."""

from __future__ import annotations

from speech_relay.config.audio import FLOAT32_SAMPLE_BYTES, DEFAULT_AUDIO_SAMPLE_RATE_HZ

# The relay expects mono float32 at its configured rate (48 kHz unless overridden).
CLIENT_SAMPLE_RATE: int = DEFAULT_AUDIO_SAMPLE_RATE_HZ

# Browser capture nodes typically hand out ~100 ms buffers.
CHUNK_MS: int = 100
FRAME_TIME_SEC: float = CHUNK_MS / 1000.0
CHUNK_SAMPLES: int = int(CLIENT_SAMPLE_RATE * FRAME_TIME_SEC)
SAMPLE_BYTES: int = FLOAT32_SAMPLE_BYTES

SAMPLES_DIR_NAME: str = "samples"
FILE_EXTS: frozenset[str] = frozenset({".wav", ".flac", ".ogg", ".mp3"})

# Pacing floor when the sender is behind real time.
MIN_SLEEP_S: float = 0.001

__all__ = [
    "CHUNK_MS",
    "CHUNK_SAMPLES",
    "CLIENT_SAMPLE_RATE",
    "FILE_EXTS",
    "FRAME_TIME_SEC",
    "MIN_SLEEP_S",
    "SAMPLES_DIR_NAME",
    "SAMPLE_BYTES",
]
