"""RecognitionStream backed by Google Cloud Speech v1 streaming recognition."""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from collections.abc import AsyncIterator

from google.cloud.speech_v1 import SpeechAsyncClient, StreamingRecognizeRequest, StreamingRecognitionConfig

from speech_relay.errors import StreamNotWritableError

from .stream import DataHandler, CloseHandler, ErrorHandler

logger = logging.getLogger(__name__)


class GoogleRecognitionStream:
    def __init__(self, *, client: SpeechAsyncClient, streaming_config: StreamingRecognitionConfig) -> None:
        self._client = client
        self._streaming_config = streaming_config

        # None is the end-of-input sentinel for the request generator.
        self._audio: asyncio.Queue[bytes | None] = asyncio.Queue()
        self._ready = asyncio.Event()
        self._settled = asyncio.Event()
        self._task: asyncio.Task | None = None

        self._ended = False
        self._destroyed = False
        self._closed = False

        self._data_handlers: list[DataHandler] = []
        self._error_handlers: list[ErrorHandler] = []
        self._close_handlers: list[CloseHandler] = []

    @property
    def writable(self) -> bool:
        return self._ready.is_set() and not self._ended and not self._destroyed

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def on_data(self, handler: DataHandler) -> None:
        self._data_handlers.append(handler)

    def on_error(self, handler: ErrorHandler) -> None:
        self._error_handlers.append(handler)

    def on_close(self, handler: CloseHandler) -> None:
        self._close_handlers.append(handler)

    def start(self) -> None:
        if self._task is not None:
            return
        self._task = asyncio.create_task(self._run())

    async def wait_ready(self) -> bool:
        await self._settled.wait()
        return self._ready.is_set() and not self._destroyed

    def write(self, chunk: bytes) -> None:
        if self._ended or self._destroyed:
            raise StreamNotWritableError("recognition stream is no longer writable")
        self._audio.put_nowait(bytes(chunk))

    def end(self) -> None:
        if self._ended or self._destroyed:
            return
        self._ended = True
        self._audio.put_nowait(None)

    def destroy(self, error: BaseException | None = None) -> None:
        if self._destroyed:
            return
        self._destroyed = True
        self._ended = True
        self._settled.set()
        if error is not None:
            logger.debug("speech: destroying stream after error: %s", error)
        self._audio.put_nowait(None)
        if self._task is not None and not self._task.done():
            self._task.cancel()

    async def _requests(self) -> AsyncIterator[StreamingRecognizeRequest]:
        yield StreamingRecognizeRequest(streaming_config=self._streaming_config)
        while True:
            chunk = await self._audio.get()
            if chunk is None:
                logger.debug("speech: input half-closed")
                return
            yield StreamingRecognizeRequest(audio_content=chunk)

    async def _run(self) -> None:
        try:
            responses = await self._client.streaming_recognize(requests=self._requests())
            self._ready.set()
            self._settled.set()
            logger.debug("speech: stream ready")
            async for response in responses:
                if self._destroyed:
                    break
                logger.debug("speech: <<< %s", response)
                await self._emit(self._data_handlers, response)
        except asyncio.CancelledError:
            logger.debug("speech: stream task cancelled")
        except Exception as exc:
            self._ended = True
            if not self._destroyed:
                logger.warning("speech: stream failed: %s", exc)
                await self._emit(self._error_handlers, exc)
        finally:
            self._ended = True
            self._settled.set()
            await self._emit_close()

    async def _emit(self, handlers: list[Any], *args: Any) -> None:
        for handler in list(handlers):
            try:
                await handler(*args)
            except Exception:
                logger.exception("speech: stream handler failed")

    async def _emit_close(self) -> None:
        if self._closed:
            return
        self._closed = True
        logger.debug("speech: stream closed")
        await self._emit(self._close_handlers)


__all__ = ["GoogleRecognitionStream"]
