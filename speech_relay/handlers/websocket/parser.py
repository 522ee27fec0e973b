"""Client command parsing."""

from __future__ import annotations

from typing import Any

import orjson

from speech_relay.config.websocket import WS_KEY_COMMAND


def parse_client_message(raw: str) -> dict[str, Any]:
    try:
        msg = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc

    if not isinstance(msg, dict):
        raise ValueError("message must be a JSON object")
    return msg


def command_name(msg: dict[str, Any]) -> str | None:
    command = msg.get(WS_KEY_COMMAND)
    if not isinstance(command, str):
        return None
    return command


__all__ = ["command_name", "parse_client_message"]
