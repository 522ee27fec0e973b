"""Transcript extraction from streaming recognition responses."""

from __future__ import annotations

from typing import Any

from speech_relay.state import TranscriptEvent


def transcript_from_response(response: Any) -> TranscriptEvent | None:
    """Return the top alternative of the first result, or None when there is no usable text."""
    results = getattr(response, "results", None)
    if not results:
        return None
    result = results[0]
    alternatives = getattr(result, "alternatives", None)
    if not alternatives:
        return None
    text = getattr(alternatives[0], "transcript", "") or ""
    if not text:
        return None
    return TranscriptEvent(text=text, is_final=bool(getattr(result, "is_final", False)))


__all__ = ["transcript_from_response"]
