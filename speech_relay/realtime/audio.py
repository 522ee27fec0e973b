"""Float32 -> PCM16 conversion for inbound client audio."""

from __future__ import annotations

import numpy as np

from speech_relay.errors import InvalidAudioFrameError
from speech_relay.config.audio import PCM16_MAX, PCM16_MIN, PCM16_SCALE, FLOAT32_SAMPLE_BYTES

_FLOAT32_LE = np.dtype("<f4")
_PCM16_LE = np.dtype("<i2")


def is_valid_frame(frame: bytes) -> bool:
    return len(frame) % FLOAT32_SAMPLE_BYTES == 0


def float32_to_pcm16(frame: bytes) -> bytes:
    """Convert little-endian float32 samples to little-endian PCM16 bytes.

    Each sample becomes round(f * 32767) clamped to [-32768, 32767]. NaN maps to
    silence and infinities to full scale. Raises InvalidAudioFrameError when the
    frame is not a whole number of samples.
    """
    if not is_valid_frame(frame):
        raise InvalidAudioFrameError(size=len(frame), sample_bytes=FLOAT32_SAMPLE_BYTES)

    # frombuffer does not copy; numpy handles unaligned source buffers itself.
    samples = np.frombuffer(frame, dtype=_FLOAT32_LE)
    scaled = np.nan_to_num(samples.astype(np.float64), nan=0.0, posinf=1.0, neginf=-1.0) * PCM16_SCALE
    pcm = np.clip(np.rint(scaled), PCM16_MIN, PCM16_MAX).astype(_PCM16_LE)
    return pcm.tobytes()


__all__ = ["float32_to_pcm16", "is_valid_frame"]
