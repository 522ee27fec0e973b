"""Logging configuration."""

from __future__ import annotations

import os

LOG_LEVEL: str = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
LOG_FORMAT: str = (os.getenv("LOG_FORMAT") or "").strip() or "%(asctime)s %(levelname)s %(name)s: %(message)s"

ENV_SHOW_GRPC_LOGS = "SHOW_GRPC_LOGS"

# Quieted to WARNING unless SHOW_GRPC_LOGS is set.
NOISY_LOGGERS: tuple[str, ...] = ("grpc", "google.auth", "google.api_core", "urllib3")

__all__ = ["ENV_SHOW_GRPC_LOGS", "LOG_FORMAT", "LOG_LEVEL", "NOISY_LOGGERS"]
