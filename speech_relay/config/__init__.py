"""Configuration module exports (env names and defaults only)."""

from .audio import DEFAULT_AUDIO_SAMPLE_RATE_HZ
from .server import DEFAULT_PORT

__all__ = [
    "DEFAULT_AUDIO_SAMPLE_RATE_HZ",
    "DEFAULT_PORT",
]
