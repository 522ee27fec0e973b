"""Environment parsing for runtime settings.

Env names and defaults live in `speech_relay/config/*`; this module resolves
them into the frozen dataclasses in `speech_relay/state/settings.py`.
"""

from __future__ import annotations

import os
from pathlib import Path

from speech_relay.state.settings import (
    AppSettings,
    AudioSettings,
    ServerSettings,
    CredentialsSettings,
    RecognitionSettings,
)
from speech_relay.config.server import (
    ENV_HOST,
    ENV_PORT,
    DEFAULT_HOST,
    DEFAULT_PORT,
    ENV_WS_ENDPOINT_PATH,
    DEFAULT_WS_ENDPOINT_PATH,
)
from speech_relay.config.secrets import (
    ENV_SPEECH_CREDENTIALS_FALLBACK,
    ENV_GOOGLE_APPLICATION_CREDENTIALS,
    DEFAULT_SPEECH_CREDENTIALS_FALLBACK,
)
from speech_relay.config.audio import (
    ENV_AUDIO_SAMPLE_RATE_HZ,
    MAX_AUDIO_SAMPLE_RATE_HZ,
    MIN_AUDIO_SAMPLE_RATE_HZ,
    ENV_STREAM_READY_TIMEOUT_S,
    DEFAULT_AUDIO_SAMPLE_RATE_HZ,
    DEFAULT_STREAM_READY_TIMEOUT_S,
)
from speech_relay.config.recognition import (
    ENV_SPEECH_MODEL,
    DEFAULT_SPEECH_MODEL,
    ENV_SPEECH_USE_ENHANCED,
    ENV_SPEECH_LANGUAGE_CODE,
    ENV_SPEECH_INTERIM_RESULTS,
    DEFAULT_SPEECH_USE_ENHANCED,
    DEFAULT_SPEECH_LANGUAGE_CODE,
    DEFAULT_SPEECH_INTERIM_RESULTS,
    ENV_SPEECH_AUTOMATIC_PUNCTUATION,
    DEFAULT_SPEECH_AUTOMATIC_PUNCTUATION,
)

_TRUE_VALUES = {"1", "true", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "no", "n", "off"}


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except Exception:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except Exception:
        return default


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    v = raw.strip().lower()
    if v in _TRUE_VALUES:
        return True
    if v in _FALSE_VALUES:
        return False
    return default


def _path_env(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return Path(raw.strip()).expanduser()


def _validate_sample_rate(sample_rate_hz: int) -> int:
    if sample_rate_hz < MIN_AUDIO_SAMPLE_RATE_HZ or sample_rate_hz > MAX_AUDIO_SAMPLE_RATE_HZ:
        raise ValueError(
            f"{ENV_AUDIO_SAMPLE_RATE_HZ} must be between {MIN_AUDIO_SAMPLE_RATE_HZ} and {MAX_AUDIO_SAMPLE_RATE_HZ}"
        )
    return sample_rate_hz


def _normalize_ws_path(path: str) -> str:
    return path if path.startswith("/") else f"/{path}"


def _load_server_settings() -> ServerSettings:
    return ServerSettings(
        host=_str_env(ENV_HOST, DEFAULT_HOST),
        port=_int_env(ENV_PORT, DEFAULT_PORT),
        ws_endpoint_path=_normalize_ws_path(_str_env(ENV_WS_ENDPOINT_PATH, DEFAULT_WS_ENDPOINT_PATH)),
    )


def _load_audio_settings() -> AudioSettings:
    sample_rate = _validate_sample_rate(_int_env(ENV_AUDIO_SAMPLE_RATE_HZ, DEFAULT_AUDIO_SAMPLE_RATE_HZ))
    ready_timeout = _float_env(ENV_STREAM_READY_TIMEOUT_S, DEFAULT_STREAM_READY_TIMEOUT_S)
    if ready_timeout <= 0:
        raise ValueError(f"{ENV_STREAM_READY_TIMEOUT_S} must be > 0")
    return AudioSettings(sample_rate_hz=sample_rate, stream_ready_timeout_s=ready_timeout)


def _load_recognition_settings() -> RecognitionSettings:
    return RecognitionSettings(
        language_code=_str_env(ENV_SPEECH_LANGUAGE_CODE, DEFAULT_SPEECH_LANGUAGE_CODE),
        model=_str_env(ENV_SPEECH_MODEL, DEFAULT_SPEECH_MODEL),
        enable_automatic_punctuation=_bool_env(ENV_SPEECH_AUTOMATIC_PUNCTUATION, DEFAULT_SPEECH_AUTOMATIC_PUNCTUATION),
        use_enhanced=_bool_env(ENV_SPEECH_USE_ENHANCED, DEFAULT_SPEECH_USE_ENHANCED),
        interim_results=_bool_env(ENV_SPEECH_INTERIM_RESULTS, DEFAULT_SPEECH_INTERIM_RESULTS),
    )


def _load_credentials_settings() -> CredentialsSettings:
    return CredentialsSettings(
        credentials_path=_path_env(ENV_GOOGLE_APPLICATION_CREDENTIALS),
        fallback_path=_path_env(ENV_SPEECH_CREDENTIALS_FALLBACK) or DEFAULT_SPEECH_CREDENTIALS_FALLBACK,
    )


def load_settings() -> AppSettings:
    return AppSettings(
        server=_load_server_settings(),
        audio=_load_audio_settings(),
        recognition=_load_recognition_settings(),
        credentials=_load_credentials_settings(),
    )


__all__ = ["load_settings"]
