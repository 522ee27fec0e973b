"""Client script utilities.

Focused modules:
- files.py: audio decoding and sample discovery
- network.py: socket tweaks
- audio/: framing and paced streaming
"""

from __future__ import annotations

from .network import enable_tcp_nodelay
from .audio import AudioStreamer
from .files import (
    EXTS,
    SAMPLES_DIR,
    find_sample_files,
    find_sample_by_name,
    make_silence_float32,
    file_to_float32_mono,
    file_duration_seconds,
)

__all__ = [
    "EXTS",
    "SAMPLES_DIR",
    "AudioStreamer",
    "enable_tcp_nodelay",
    "file_duration_seconds",
    "file_to_float32_mono",
    "find_sample_by_name",
    "find_sample_files",
    "make_silence_float32",
]
