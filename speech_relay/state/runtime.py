"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from speech_relay.state.settings import AppSettings
    from speech_relay.realtime.bridge import RecognitionBridge


@dataclass(slots=True)
class RuntimeDeps:
    settings: AppSettings
    recognition_bridge: RecognitionBridge
    _speech_client: Any = None

    async def shutdown(self) -> None:
        if self._speech_client is None:
            return
        try:
            await self._speech_client.transport.close()
        except Exception:
            logger.exception("runtime shutdown failed")


__all__ = ["RuntimeDeps"]
