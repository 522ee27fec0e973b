"""Per-connection session bridging client audio to one upstream recognition stream."""

from __future__ import annotations

import asyncio
import logging
import functools
from typing import Any
from collections.abc import Callable

from google.api_core.exceptions import GoogleAPICallError

from speech_relay.state import SessionState
from speech_relay.config.audio import FLOAT32_SAMPLE_BYTES
from speech_relay.config.websocket import (
    WS_ERROR_SPEECH_PREFIX,
    WS_ERROR_SPEECH_UNKNOWN,
    WS_COMMAND_STOP_STREAMING,
    WS_ERROR_STREAM_START_FAILED,
)

from .channel import ClientChannel
from .stream import RecognitionStream
from .transcript import transcript_from_response
from .audio import is_valid_frame, float32_to_pcm16

logger = logging.getLogger(__name__)

StreamFactory = Callable[[], RecognitionStream]


def describe_stream_error(error: BaseException) -> str:
    if isinstance(error, GoogleAPICallError):
        # str() of an API error is prefixed with the status code.
        message = error.message or WS_ERROR_SPEECH_UNKNOWN
    else:
        message = str(error) or WS_ERROR_SPEECH_UNKNOWN
    return f"{WS_ERROR_SPEECH_PREFIX}: {message}"


class RelaySession:
    """Owns the upstream stream for one client connection.

    Every stream callback is bound to the stream it was registered on and is
    ignored once that stream is no longer the session's live stream.
    """

    def __init__(self, channel: ClientChannel, *, open_stream: StreamFactory, ready_timeout_s: float) -> None:
        self._channel = channel
        self._open_stream = open_stream
        self._ready_timeout_s = float(ready_timeout_s)

        self._state = SessionState.IDLE
        self._stream: RecognitionStream | None = None
        # First frame of a stream that is still connecting (at most one).
        self._pending: bytes | None = None
        self._ready_task: asyncio.Task | None = None
        # stopStreaming received before the stream became writable.
        self._stop_requested = False
        self._client_open = True

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def stream(self) -> RecognitionStream | None:
        return self._stream

    async def on_audio(self, frame: bytes) -> None:
        if not self._client_open:
            return
        if not frame:
            logger.debug("audio: dropping empty frame")
            return
        if not is_valid_frame(frame):
            logger.warning(
                "audio: dropping frame of %d bytes (not a multiple of %d)", len(frame), FLOAT32_SAMPLE_BYTES
            )
            return

        if self._state is SessionState.STREAMING:
            self._write(self._stream, frame)
            return
        if self._state is SessionState.CLOSING:
            logger.debug("audio: stream is closing; dropping %d bytes", len(frame))
            return
        if self._stream is not None:
            logger.debug("audio: stream not ready yet; dropping %d bytes", len(frame))
            return

        await self._start_stream(frame)

    async def on_command(self, command: Any) -> None:
        if command != WS_COMMAND_STOP_STREAMING:
            logger.warning("command: ignoring unknown command %r", command)
            return

        stream = self._stream
        if self._state is SessionState.IDLE and stream is not None and not stream.destroyed:
            logger.info("command: %s while stream is connecting; closing once ready", command)
            self._stop_requested = True
            return
        if self._state is not SessionState.STREAMING or stream is None or not stream.writable:
            logger.info("command: %s with no writable stream; ignoring", command)
            return

        logger.info("session: client requested stop; half-closing upstream")
        stream.end()
        self._state = SessionState.CLOSING

    async def on_client_disconnect(self) -> None:
        self._client_open = False
        self._channel.mark_closed()
        stream = self._stream
        if stream is not None:
            logger.info("session: client disconnected; closing upstream")
            if stream.writable:
                stream.end()
                self._state = SessionState.CLOSING
            self._teardown(stream)
        self._finish()

    async def on_client_error(self, error: BaseException) -> None:
        self._client_open = False
        self._channel.mark_closed()
        stream = self._stream
        if stream is not None:
            logger.info("session: client connection error; destroying upstream")
            self._teardown(stream, error)
        self._finish()

    async def _start_stream(self, frame: bytes) -> None:
        try:
            stream = self._open_stream()
            stream.on_data(functools.partial(self._handle_data, stream))
            stream.on_error(functools.partial(self._handle_error, stream))
            stream.on_close(functools.partial(self._handle_close, stream))
            stream.start()
        except Exception:
            logger.exception("speech: failed to start recognition stream")
            await self._channel.send_error(WS_ERROR_STREAM_START_FAILED)
            return

        logger.info("speech: recognition stream started")
        self._stream = stream
        self._pending = frame
        self._state = SessionState.IDLE
        self._ready_task = asyncio.create_task(self._deliver_when_ready(stream))

    async def _deliver_when_ready(self, stream: RecognitionStream) -> None:
        try:
            ready = await asyncio.wait_for(stream.wait_ready(), timeout=self._ready_timeout_s)
        except TimeoutError:
            ready = False

        if stream is not self._stream:
            return
        pending, self._pending = self._pending, None
        if ready and stream.writable:
            self._state = SessionState.STREAMING
            if pending is not None:
                self._write(stream, pending)
            self._apply_requested_stop(stream)
            return

        logger.warning(
            "audio: stream not writable after %.0f ms; dropping first frame", self._ready_timeout_s * 1000.0
        )
        if await stream.wait_ready() and stream is self._stream and stream.writable:
            self._state = SessionState.STREAMING
            self._apply_requested_stop(stream)

    def _apply_requested_stop(self, stream: RecognitionStream) -> None:
        if not self._stop_requested:
            return
        self._stop_requested = False
        logger.info("session: applying stop requested while connecting; half-closing upstream")
        stream.end()
        self._state = SessionState.CLOSING

    def _write(self, stream: RecognitionStream | None, frame: bytes) -> None:
        if stream is None or stream is not self._stream or not stream.writable:
            logger.debug("audio: no writable stream; dropping %d bytes", len(frame))
            return
        pcm = float32_to_pcm16(frame)
        logger.debug("speech: >>> writing %d bytes", len(pcm))
        stream.write(pcm)

    async def _handle_data(self, stream: RecognitionStream, response: Any) -> None:
        if stream is not self._stream:
            return
        event = transcript_from_response(response)
        if event is None:
            logger.debug("speech: response without transcript")
            return
        logger.debug("speech: transcript is_final=%s %r", event.is_final, event.text)
        await self._channel.send_transcript(event.text, is_final=event.is_final)

    async def _handle_error(self, stream: RecognitionStream, error: BaseException) -> None:
        if stream is not self._stream:
            return
        message = describe_stream_error(error)
        logger.error("speech: %s", message)
        await self._channel.send_error(message)
        self._teardown(stream, error)
        self._finish()

    async def _handle_close(self, stream: RecognitionStream) -> None:
        if stream is not self._stream:
            return
        logger.info("speech: recognition stream closed")
        self._release()
        self._finish()

    def _teardown(self, stream: RecognitionStream, error: BaseException | None = None) -> None:
        if stream is not self._stream:
            return
        self._release()
        stream.destroy(error)

    def _release(self) -> None:
        self._stream = None
        self._pending = None
        self._stop_requested = False
        task, self._ready_task = self._ready_task, None
        if task is not None and task is not asyncio.current_task() and not task.done():
            task.cancel()

    def _finish(self) -> None:
        if self._stream is None:
            self._state = SessionState.TERMINATED

    async def aclose(self) -> None:
        """Release the upstream stream if the receive loop exited without a disconnect event."""
        if self._client_open or self._stream is not None:
            await self.on_client_disconnect()


__all__ = ["RelaySession", "StreamFactory", "describe_stream_error"]
