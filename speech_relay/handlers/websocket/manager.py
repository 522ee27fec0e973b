"""Primary WebSocket connection handler orchestration."""

from __future__ import annotations

import logging
import contextlib

from fastapi import WebSocket

from speech_relay.state import RuntimeDeps
from speech_relay.realtime import ClientChannel, RelaySession

from .message_loop import run_message_loop

logger = logging.getLogger(__name__)


def _client_label(ws: WebSocket) -> str:
    client = ws.client
    if client is None:
        return "unknown"
    return f"{client.host}:{client.port}"


async def handle_websocket_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> None:
    await ws.accept()
    client = _client_label(ws)
    logger.info("WebSocket connection accepted from %s", client)

    bridge = runtime_deps.recognition_bridge
    session = RelaySession(
        ClientChannel(ws),
        open_stream=bridge.new_stream,
        ready_timeout_s=bridge.ready_timeout_s,
    )
    try:
        await run_message_loop(ws, session)
    finally:
        with contextlib.suppress(Exception):
            await session.aclose()
        logger.info("WebSocket connection closed for %s state=%s", client, session.state.value)


__all__ = ["handle_websocket_connection"]
