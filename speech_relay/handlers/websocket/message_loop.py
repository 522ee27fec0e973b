"""WebSocket receive loop: binary frames are audio, text frames are commands."""

from __future__ import annotations

import logging

from fastapi import WebSocket, WebSocketDisconnect

from speech_relay.realtime import RelaySession

from .parser import command_name, parse_client_message

logger = logging.getLogger(__name__)


async def _handle_text(session: RelaySession, raw: str) -> None:
    try:
        msg = parse_client_message(raw)
    except ValueError as exc:
        logger.warning("command: ignoring unparsable message (%s): %.200r", exc, raw)
        return
    logger.debug("command: parsed %s", msg)
    await session.on_command(command_name(msg))


async def run_message_loop(ws: WebSocket, session: RelaySession) -> None:
    try:
        while True:
            message = await ws.receive()
            if message["type"] == "websocket.disconnect":
                logger.info("client: disconnected code=%s", message.get("code"))
                await session.on_client_disconnect()
                return

            data = message.get("bytes")
            if data is not None:
                logger.debug("client: received audio frame of %d bytes", len(data))
                await session.on_audio(data)
                continue

            text = message.get("text")
            if text is not None:
                await _handle_text(session, text)
    except WebSocketDisconnect as exc:
        logger.info("client: disconnected code=%s", exc.code)
        await session.on_client_disconnect()
    except Exception as exc:
        logger.exception("client: connection error")
        await session.on_client_error(exc)


__all__ = ["run_message_loop"]
