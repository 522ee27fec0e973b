"""Google Cloud Speech client construction."""

from __future__ import annotations

import logging
from pathlib import Path

from google.cloud.speech_v1 import SpeechAsyncClient

from speech_relay.errors import SpeechClientError

logger = logging.getLogger(__name__)


def build_speech_client(credentials_path: Path) -> SpeechAsyncClient:
    try:
        client = SpeechAsyncClient.from_service_account_file(str(credentials_path))
    except Exception as exc:
        raise SpeechClientError(f"failed to initialize speech client from {credentials_path}: {exc}") from exc
    logger.info("speech: client initialized")
    return client


__all__ = ["build_speech_client"]
