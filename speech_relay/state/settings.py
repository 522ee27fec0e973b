"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from pathlib import Path
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ServerSettings:
    host: str
    port: int
    ws_endpoint_path: str


@dataclass(frozen=True, slots=True)
class AudioSettings:
    sample_rate_hz: int
    stream_ready_timeout_s: float


@dataclass(frozen=True, slots=True)
class RecognitionSettings:
    language_code: str
    model: str
    enable_automatic_punctuation: bool
    use_enhanced: bool
    interim_results: bool


@dataclass(frozen=True, slots=True)
class CredentialsSettings:
    credentials_path: Path | None
    fallback_path: Path


@dataclass(frozen=True, slots=True)
class AppSettings:
    server: ServerSettings
    audio: AudioSettings
    recognition: RecognitionSettings
    credentials: CredentialsSettings


__all__ = [
    "AppSettings",
    "AudioSettings",
    "CredentialsSettings",
    "RecognitionSettings",
    "ServerSettings",
]
