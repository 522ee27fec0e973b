"""File and audio processing utilities for test clients."""

from __future__ import annotations

import os
from pathlib import Path

import numpy as np
import soxr
import soundfile as sf

from tests.params import config

SAMPLES_DIR = Path(config.SAMPLES_DIR_NAME)
EXTS = config.FILE_EXTS


def find_sample_files() -> list[str]:
    if not SAMPLES_DIR.exists():
        return []
    files: list[str] = []
    for root, _, filenames in os.walk(SAMPLES_DIR):
        for f in filenames:
            if Path(f).suffix.lower() in EXTS:
                files.append(str(Path(root) / f))
    return sorted(files)


def find_sample_by_name(filename: str) -> str | None:
    for candidate in (Path(filename), SAMPLES_DIR / filename):
        if candidate.is_file() and candidate.suffix.lower() in EXTS:
            return str(candidate)
    return None


def _resample(x: np.ndarray, sr: int, target_sr: int) -> np.ndarray:
    if sr == target_sr:
        return x
    # soxr expects float32 for best results.
    y = soxr.resample(x.astype(np.float32, copy=False), sr, target_sr)
    return y.astype(np.float32, copy=False)


def file_to_float32_mono(path: str, *, sr: int = config.CLIENT_SAMPLE_RATE) -> bytes:
    """Load an audio file and return little-endian float32 mono bytes at `sr`."""
    x, file_sr = sf.read(path, dtype="float32", always_2d=False)
    if getattr(x, "ndim", 1) > 1:
        x = x.mean(axis=1)
    x = _resample(np.asarray(x, dtype=np.float32), int(file_sr), sr)
    return np.clip(x, -1.0, 1.0).astype("<f4", copy=False).tobytes()


def file_duration_seconds(path: str) -> float:
    info = sf.info(path)
    return float(info.frames / info.samplerate)


def make_silence_float32(seconds: float, *, sr: int = config.CLIENT_SAMPLE_RATE) -> bytes:
    n = int(max(0.0, seconds) * sr)
    return np.zeros(n, dtype="<f4").tobytes()


__all__ = [
    "SAMPLES_DIR",
    "file_duration_seconds",
    "file_to_float32_mono",
    "find_sample_by_name",
    "find_sample_files",
    "make_silence_float32",
]
