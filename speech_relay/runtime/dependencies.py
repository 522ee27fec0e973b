"""Runtime dependency construction (credentials, speech client, stream bridge)."""

from __future__ import annotations

import logging

from speech_relay.state import RuntimeDeps
from speech_relay.state.settings import AppSettings
from speech_relay.realtime.bridge import RecognitionBridge

from .settings import load_settings
from .speech import build_speech_client
from .credentials import resolve_credentials_path

logger = logging.getLogger(__name__)


async def build_runtime_deps() -> RuntimeDeps:
    settings: AppSettings = load_settings()

    credentials_path = resolve_credentials_path(settings.credentials)
    speech_client = build_speech_client(credentials_path)

    recognition_bridge = RecognitionBridge(
        speech_client=speech_client,
        audio=settings.audio,
        recognition=settings.recognition,
    )
    logger.info(
        "runtime: speech stream config sample_rate=%s language=%s model=%s",
        settings.audio.sample_rate_hz,
        settings.recognition.language_code,
        settings.recognition.model,
    )

    return RuntimeDeps(
        settings=settings,
        recognition_bridge=recognition_bridge,
        _speech_client=speech_client,
    )


__all__ = ["RuntimeDeps", "build_runtime_deps"]
