from .runtime import RuntimeDeps
from .session import SessionState
from .settings import AppSettings
from .transcript import TranscriptEvent

__all__ = ["AppSettings", "RuntimeDeps", "SessionState", "TranscriptEvent"]
