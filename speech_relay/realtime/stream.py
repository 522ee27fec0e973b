"""Upstream recognition stream interface."""

from __future__ import annotations

from typing import Any, Protocol
from collections.abc import Callable, Awaitable

DataHandler = Callable[[Any], Awaitable[None]]
ErrorHandler = Callable[[BaseException], Awaitable[None]]
CloseHandler = Callable[[], Awaitable[None]]


class RecognitionStream(Protocol):
    """A bidirectional recognition call: audio in, responses out.

    `start()` begins the call; `wait_ready()` resolves once the call accepts
    audio (True) or has closed without ever becoming ready (False). `end()`
    half-closes the write side and lets pending results drain; `destroy()`
    tears the call down immediately. Close handlers fire at most once.
    """

    @property
    def writable(self) -> bool: ...

    @property
    def destroyed(self) -> bool: ...

    def start(self) -> None: ...

    async def wait_ready(self) -> bool: ...

    def write(self, chunk: bytes) -> None: ...

    def end(self) -> None: ...

    def destroy(self, error: BaseException | None = None) -> None: ...

    def on_data(self, handler: DataHandler) -> None: ...

    def on_error(self, handler: ErrorHandler) -> None: ...

    def on_close(self, handler: CloseHandler) -> None: ...


__all__ = ["CloseHandler", "DataHandler", "ErrorHandler", "RecognitionStream"]
