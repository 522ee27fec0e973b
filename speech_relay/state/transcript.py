"""Transcript fragments relayed to clients."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TranscriptEvent:
    text: str
    is_final: bool


__all__ = ["TranscriptEvent"]
