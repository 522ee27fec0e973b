from __future__ import annotations

from pathlib import Path

import pytest

from speech_relay.runtime.settings import load_settings

_ENV_NAMES = (
    "HOST",
    "PORT",
    "WS_ENDPOINT_PATH",
    "AUDIO_SAMPLE_RATE_HZ",
    "STREAM_READY_TIMEOUT_S",
    "SPEECH_LANGUAGE_CODE",
    "SPEECH_MODEL",
    "SPEECH_AUTOMATIC_PUNCTUATION",
    "SPEECH_USE_ENHANCED",
    "SPEECH_INTERIM_RESULTS",
    "GOOGLE_APPLICATION_CREDENTIALS",
    "SPEECH_CREDENTIALS_FALLBACK",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = load_settings()

    assert settings.server.host == "0.0.0.0"
    assert settings.server.port == 8081
    assert settings.server.ws_endpoint_path == "/"
    assert settings.audio.sample_rate_hz == 48000
    assert settings.audio.stream_ready_timeout_s == pytest.approx(0.25)
    assert settings.recognition.language_code == "pt-BR"
    assert settings.recognition.model == "latest_long"
    assert settings.recognition.enable_automatic_punctuation is True
    assert settings.recognition.use_enhanced is True
    assert settings.recognition.interim_results is True
    assert settings.credentials.credentials_path is None
    assert settings.credentials.fallback_path == Path("credentials.json")


def test_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("WS_ENDPOINT_PATH", "listen")
    monkeypatch.setenv("AUDIO_SAMPLE_RATE_HZ", "16000")
    monkeypatch.setenv("STREAM_READY_TIMEOUT_S", "0.5")
    monkeypatch.setenv("SPEECH_LANGUAGE_CODE", "en-US")
    monkeypatch.setenv("SPEECH_INTERIM_RESULTS", "off")
    monkeypatch.setenv("SPEECH_USE_ENHANCED", "0")
    monkeypatch.setenv("GOOGLE_APPLICATION_CREDENTIALS", "/etc/keys/sa.json")

    settings = load_settings()

    assert settings.server.port == 9000
    assert settings.server.ws_endpoint_path == "/listen"
    assert settings.audio.sample_rate_hz == 16000
    assert settings.audio.stream_ready_timeout_s == pytest.approx(0.5)
    assert settings.recognition.language_code == "en-US"
    assert settings.recognition.interim_results is False
    assert settings.recognition.use_enhanced is False
    assert settings.credentials.credentials_path == Path("/etc/keys/sa.json")


def test_unparsable_values_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "eighty")
    monkeypatch.setenv("SPEECH_AUTOMATIC_PUNCTUATION", "maybe")
    monkeypatch.setenv("SPEECH_MODEL", "   ")

    settings = load_settings()

    assert settings.server.port == 8081
    assert settings.recognition.enable_automatic_punctuation is True
    assert settings.recognition.model == "latest_long"


@pytest.mark.parametrize("rate", ["4000", "96000"])
def test_sample_rate_out_of_range(monkeypatch: pytest.MonkeyPatch, rate: str) -> None:
    monkeypatch.setenv("AUDIO_SAMPLE_RATE_HZ", rate)
    with pytest.raises(ValueError, match="AUDIO_SAMPLE_RATE_HZ"):
        load_settings()


def test_ready_timeout_must_be_positive(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STREAM_READY_TIMEOUT_S", "0")
    with pytest.raises(ValueError, match="STREAM_READY_TIMEOUT_S"):
        load_settings()
