"""Shared error types for the speech relay."""

from __future__ import annotations

from dataclasses import dataclass


class RelayError(Exception):
    """Base class for relay errors."""


class CredentialsError(RelayError):
    """Raised at startup when no usable credential file can be found."""


class SpeechClientError(RelayError):
    """Raised at startup when the speech client cannot be constructed."""


class StreamNotWritableError(RelayError):
    """Raised when audio is written to a recognition stream that was ended or destroyed."""


@dataclass(frozen=True, slots=True)
class InvalidAudioFrameError(ValueError):
    """Raised when an inbound frame is not a whole number of float32 samples."""

    size: int
    sample_bytes: int

    def __str__(self) -> str:
        return f"frame of {self.size} bytes is not a multiple of {self.sample_bytes}"


__all__ = [
    "CredentialsError",
    "InvalidAudioFrameError",
    "RelayError",
    "SpeechClientError",
    "StreamNotWritableError",
]
