"""WebSocket protocol configuration and constants."""

from __future__ import annotations

# Client -> server command keys
WS_KEY_COMMAND = "command"
WS_COMMAND_STOP_STREAMING = "stopStreaming"

# Server -> client message keys
WS_KEY_TRANSCRIPT = "transcript"
WS_KEY_IS_FINAL = "isFinal"
WS_KEY_ERROR = "error"

# Close codes
WS_CLOSE_NORMAL_CODE = 1000

# Error messages (value of the "error" key)
WS_ERROR_STREAM_START_FAILED = "internal failure starting transcription"
WS_ERROR_SPEECH_PREFIX = "Speech API error"
WS_ERROR_SPEECH_UNKNOWN = "unknown error"

__all__ = [
    "WS_CLOSE_NORMAL_CODE",
    "WS_COMMAND_STOP_STREAMING",
    "WS_ERROR_SPEECH_PREFIX",
    "WS_ERROR_SPEECH_UNKNOWN",
    "WS_ERROR_STREAM_START_FAILED",
    "WS_KEY_COMMAND",
    "WS_KEY_ERROR",
    "WS_KEY_IS_FINAL",
    "WS_KEY_TRANSCRIPT",
]
