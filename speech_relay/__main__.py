"""Process entry point: resolve credentials, then serve the relay with uvicorn."""

from __future__ import annotations

import logging

import uvicorn

from speech_relay.errors import RelayError
from speech_relay.config.logging import LOG_LEVEL
from speech_relay.runtime.settings import load_settings
from speech_relay.runtime.logging import configure_logging
from speech_relay.runtime.credentials import resolve_credentials_path

logger = logging.getLogger("speech_relay")


def main() -> int:
    configure_logging()
    try:
        settings = load_settings()
        resolve_credentials_path(settings.credentials)
    except (RelayError, ValueError) as exc:
        logger.error("startup: %s", exc)
        return 1

    logger.info(
        "startup: listening on %s:%s (ws path %s, sample rate %s Hz)",
        settings.server.host,
        settings.server.port,
        settings.server.ws_endpoint_path,
        settings.audio.sample_rate_hz,
    )
    uvicorn.run(
        "speech_relay.server:app",
        host=settings.server.host,
        port=settings.server.port,
        log_level=LOG_LEVEL.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
