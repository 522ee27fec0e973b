from speech_relay.state import SessionState

from .bridge import RecognitionBridge
from .channel import ClientChannel
from .session import RelaySession
from .stream import RecognitionStream

__all__ = ["ClientChannel", "RecognitionBridge", "RecognitionStream", "RelaySession", "SessionState"]
