"""Client-facing side of a session: JSON text frames over the accepted WebSocket."""

from __future__ import annotations

import logging
from typing import Any

import orjson
from fastapi import WebSocket, WebSocketDisconnect
from fastapi.websockets import WebSocketState

from speech_relay.config.websocket import WS_KEY_ERROR, WS_KEY_IS_FINAL, WS_KEY_TRANSCRIPT

logger = logging.getLogger(__name__)


class ClientChannel:
    def __init__(self, ws: WebSocket) -> None:
        self._ws = ws
        self._closed = False

    @property
    def is_open(self) -> bool:
        if self._closed:
            return False
        return (
            self._ws.client_state == WebSocketState.CONNECTED
            and self._ws.application_state == WebSocketState.CONNECTED
        )

    def mark_closed(self) -> None:
        self._closed = True

    async def send_json(self, payload: dict[str, Any]) -> bool:
        if not self.is_open:
            logger.debug("client: connection not open; dropping %s", payload)
            return False
        try:
            await self._ws.send_text(orjson.dumps(payload).decode("utf-8"))
        except WebSocketDisconnect:
            self._closed = True
            return False
        except Exception:
            logger.debug("client: WebSocket send failed", exc_info=True)
            self._closed = True
            return False
        return True

    async def send_transcript(self, text: str, *, is_final: bool) -> bool:
        return await self.send_json({WS_KEY_TRANSCRIPT: text, WS_KEY_IS_FINAL: is_final})

    async def send_error(self, message: str) -> bool:
        return await self.send_json({WS_KEY_ERROR: message})


__all__ = ["ClientChannel"]
