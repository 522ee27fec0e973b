"""Main FastAPI server for the speech relay."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from collections.abc import Callable, Awaitable

from fastapi import FastAPI, WebSocket
from fastapi.responses import ORJSONResponse

from speech_relay.state import RuntimeDeps
from speech_relay.runtime.settings import load_settings
from speech_relay.runtime.logging import configure_logging
from speech_relay.runtime.dependencies import build_runtime_deps
from speech_relay.handlers.websocket.manager import handle_websocket_connection

logger = logging.getLogger(__name__)

DepsBuilder = Callable[[], Awaitable[RuntimeDeps]]


def create_app(build_deps: DepsBuilder = build_runtime_deps, *, ws_endpoint_path: str | None = None) -> FastAPI:
    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        runtime_deps = await build_deps()
        app.state.runtime_deps = runtime_deps
        logger.info("runtime: ready")
        try:
            yield
        finally:
            deps = getattr(app.state, "runtime_deps", None)
            if deps is not None:
                await deps.shutdown()

    app = FastAPI(default_response_class=ORJSONResponse, lifespan=_lifespan)

    @app.get("/")
    async def root() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    @app.websocket(ws_endpoint_path or load_settings().server.ws_endpoint_path)
    async def websocket_endpoint(websocket: WebSocket) -> None:
        runtime_deps = getattr(app.state, "runtime_deps", None)
        if runtime_deps is None:
            raise RuntimeError("Runtime dependencies are not initialized")
        await handle_websocket_connection(websocket, runtime_deps)

    return app


configure_logging()

app = create_app()
