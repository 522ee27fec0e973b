"""Listener configuration (env names and defaults only)."""

from __future__ import annotations

ENV_HOST = "HOST"
ENV_PORT = "PORT"
ENV_WS_ENDPOINT_PATH = "WS_ENDPOINT_PATH"

DEFAULT_HOST: str = "0.0.0.0"  # noqa: S104
DEFAULT_PORT: int = 8081
DEFAULT_WS_ENDPOINT_PATH: str = "/"

__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DEFAULT_WS_ENDPOINT_PATH",
    "ENV_HOST",
    "ENV_PORT",
    "ENV_WS_ENDPOINT_PATH",
]
