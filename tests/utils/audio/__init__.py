from __future__ import annotations

from .streamer import AudioStreamer

__all__ = ["AudioStreamer"]
