"""Inbound audio format configuration."""

from __future__ import annotations

ENV_AUDIO_SAMPLE_RATE_HZ = "AUDIO_SAMPLE_RATE_HZ"
ENV_STREAM_READY_TIMEOUT_S = "STREAM_READY_TIMEOUT_S"

# Clients send mono float32 PCM; the speech API must be told the same rate.
DEFAULT_AUDIO_SAMPLE_RATE_HZ: int = 48000

# Google streaming recognition accepts LINEAR16 between 8 kHz and 48 kHz.
MIN_AUDIO_SAMPLE_RATE_HZ: int = 8000
MAX_AUDIO_SAMPLE_RATE_HZ: int = 48000

# How long the first frame may wait for the upstream stream to become writable.
DEFAULT_STREAM_READY_TIMEOUT_S: float = 0.25

FLOAT32_SAMPLE_BYTES: int = 4
PCM16_SCALE: int = 32767
PCM16_MIN: int = -32768
PCM16_MAX: int = 32767

__all__ = [
    "DEFAULT_AUDIO_SAMPLE_RATE_HZ",
    "DEFAULT_STREAM_READY_TIMEOUT_S",
    "ENV_AUDIO_SAMPLE_RATE_HZ",
    "ENV_STREAM_READY_TIMEOUT_S",
    "FLOAT32_SAMPLE_BYTES",
    "MAX_AUDIO_SAMPLE_RATE_HZ",
    "MIN_AUDIO_SAMPLE_RATE_HZ",
    "PCM16_MAX",
    "PCM16_MIN",
    "PCM16_SCALE",
]
