"""Speech recognition request configuration (env names and defaults only)."""

from __future__ import annotations

ENV_SPEECH_LANGUAGE_CODE = "SPEECH_LANGUAGE_CODE"
ENV_SPEECH_MODEL = "SPEECH_MODEL"
ENV_SPEECH_AUTOMATIC_PUNCTUATION = "SPEECH_AUTOMATIC_PUNCTUATION"
ENV_SPEECH_USE_ENHANCED = "SPEECH_USE_ENHANCED"
ENV_SPEECH_INTERIM_RESULTS = "SPEECH_INTERIM_RESULTS"

DEFAULT_SPEECH_LANGUAGE_CODE: str = "pt-BR"
DEFAULT_SPEECH_MODEL: str = "latest_long"
DEFAULT_SPEECH_AUTOMATIC_PUNCTUATION: bool = True
DEFAULT_SPEECH_USE_ENHANCED: bool = True
DEFAULT_SPEECH_INTERIM_RESULTS: bool = True

# Inbound audio is mono.
SPEECH_AUDIO_CHANNEL_COUNT: int = 1

__all__ = [
    "DEFAULT_SPEECH_AUTOMATIC_PUNCTUATION",
    "DEFAULT_SPEECH_INTERIM_RESULTS",
    "DEFAULT_SPEECH_LANGUAGE_CODE",
    "DEFAULT_SPEECH_MODEL",
    "DEFAULT_SPEECH_USE_ENHANCED",
    "ENV_SPEECH_AUTOMATIC_PUNCTUATION",
    "ENV_SPEECH_INTERIM_RESULTS",
    "ENV_SPEECH_LANGUAGE_CODE",
    "ENV_SPEECH_MODEL",
    "ENV_SPEECH_USE_ENHANCED",
    "SPEECH_AUDIO_CHANNEL_COUNT",
]
