"""FastAPI application exposing the room functions over the callable protocol.

Requests are ``POST /<functionName>`` with a ``{"data": {...}}`` body and
responses are ``{"result": <envelope>}``. Handler-level failures are part of
the envelope, so they are returned with HTTP 200.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from json import JSONDecodeError
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from party_dj import __version__
from party_dj.domain.shared.messages import ErrorMessages

if TYPE_CHECKING:
    from party_dj.application.functions import RoomFunctions
    from party_dj.config.container import Container

logger = logging.getLogger(__name__)


def _invalid_argument(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": {"status": "INVALID_ARGUMENT", "message": message}},
    )


async def _read_payload(request: Request) -> dict[str, Any] | None:
    try:
        body = await request.json()
    except (JSONDecodeError, UnicodeDecodeError):
        return None

    if not isinstance(body, dict):
        return None
    data = body.get("data", body)
    return data if isinstance(data, dict) else None


def _register_function(app: FastAPI, functions: RoomFunctions, name: str) -> None:
    async def endpoint(request: Request) -> JSONResponse:
        payload = await _read_payload(request)
        if payload is None:
            return _invalid_argument(ErrorMessages.REQUEST_BODY_NOT_OBJECT)

        envelope = await functions.call(name, payload)
        return JSONResponse(content={"result": envelope})

    app.add_api_route(f"/{name}", endpoint, methods=["POST"], name=name)


def create_app(container: Container) -> FastAPI:
    """Build the FastAPI app; the container's lifecycle follows the app's."""

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        await container.initialize()
        try:
            yield
        finally:
            await container.shutdown()

    app = FastAPI(title="PartyDJ room functions", version=__version__, lifespan=lifespan)

    functions = container.room_functions
    for name in functions.names:
        _register_function(app, functions, name)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
