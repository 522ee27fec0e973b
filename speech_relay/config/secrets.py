"""Credential file configuration."""

from __future__ import annotations

from pathlib import Path

ENV_GOOGLE_APPLICATION_CREDENTIALS = "GOOGLE_APPLICATION_CREDENTIALS"
ENV_SPEECH_CREDENTIALS_FALLBACK = "SPEECH_CREDENTIALS_FALLBACK"

# Used when GOOGLE_APPLICATION_CREDENTIALS is unset.
DEFAULT_SPEECH_CREDENTIALS_FALLBACK: Path = Path("credentials.json")

__all__ = [
    "DEFAULT_SPEECH_CREDENTIALS_FALLBACK",
    "ENV_GOOGLE_APPLICATION_CREDENTIALS",
    "ENV_SPEECH_CREDENTIALS_FALLBACK",
]
