from __future__ import annotations

from types import SimpleNamespace

from google.cloud.speech_v1 import (
    StreamingRecognitionResult,
    StreamingRecognizeResponse,
    SpeechRecognitionAlternative,
)

from speech_relay.state import TranscriptEvent
from speech_relay.realtime.transcript import transcript_from_response

from tests.support.fakes import make_response


def test_extracts_top_alternative_of_first_result() -> None:
    response = make_response("bom dia", "bom diaa", is_final=True)
    assert transcript_from_response(response) == TranscriptEvent(text="bom dia", is_final=True)


def test_interim_flag_preserved() -> None:
    assert transcript_from_response(make_response("bom")) == TranscriptEvent(text="bom", is_final=False)


def test_ignores_responses_without_usable_text() -> None:
    assert transcript_from_response(SimpleNamespace(results=[])) is None
    assert transcript_from_response(SimpleNamespace(results=[SimpleNamespace(alternatives=[], is_final=True)])) is None
    assert transcript_from_response(make_response("")) is None


def test_reads_speech_api_messages() -> None:
    response = StreamingRecognizeResponse(
        results=[
            StreamingRecognitionResult(
                alternatives=[SpeechRecognitionAlternative(transcript="olá mundo", confidence=0.9)],
                is_final=True,
            )
        ]
    )
    assert transcript_from_response(response) == TranscriptEvent(text="olá mundo", is_final=True)


def test_speech_event_only_response_is_ignored() -> None:
    response = StreamingRecognizeResponse(
        speech_event_type=StreamingRecognizeResponse.SpeechEventType.END_OF_SINGLE_UTTERANCE
    )
    assert transcript_from_response(response) is None
