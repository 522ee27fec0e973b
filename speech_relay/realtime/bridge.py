"""Factories for bridging client sessions to Google streaming recognition."""

from __future__ import annotations

from google.cloud.speech_v1 import RecognitionConfig, SpeechAsyncClient, StreamingRecognitionConfig

from speech_relay.state.settings import AudioSettings, RecognitionSettings
from speech_relay.config.recognition import SPEECH_AUDIO_CHANNEL_COUNT

from .stream import RecognitionStream
from .google_stream import GoogleRecognitionStream


def build_streaming_config(audio: AudioSettings, recognition: RecognitionSettings) -> StreamingRecognitionConfig:
    return StreamingRecognitionConfig(
        config=RecognitionConfig(
            encoding=RecognitionConfig.AudioEncoding.LINEAR16,
            sample_rate_hertz=audio.sample_rate_hz,
            audio_channel_count=SPEECH_AUDIO_CHANNEL_COUNT,
            language_code=recognition.language_code,
            enable_automatic_punctuation=recognition.enable_automatic_punctuation,
            model=recognition.model,
            use_enhanced=recognition.use_enhanced,
        ),
        interim_results=recognition.interim_results,
    )


class RecognitionBridge:
    def __init__(
        self,
        *,
        speech_client: SpeechAsyncClient,
        audio: AudioSettings,
        recognition: RecognitionSettings,
    ) -> None:
        self._speech_client = speech_client
        self._streaming_config = build_streaming_config(audio, recognition)
        self.ready_timeout_s = audio.stream_ready_timeout_s

    def new_stream(self) -> RecognitionStream:
        return GoogleRecognitionStream(client=self._speech_client, streaming_config=self._streaming_config)


__all__ = ["RecognitionBridge", "build_streaming_config"]
