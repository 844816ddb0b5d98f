"""FastAPI application whose responses are produced by the response engine."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from mangum import Mangum

from httpreply import __version__
from httpreply.adapters import protocol_from_scope, to_starlette_response
from httpreply.config import get_settings
from httpreply.errors import ResponseError
from httpreply.factory import create

logger = logging.getLogger(__name__)


def _health_response(request: Request) -> Response:
    entity = create(
        200,
        {"status": "ok", "version": __version__},
        protocol_version=protocol_from_scope(request.scope),
    )
    try:
        entity.send()
    except ResponseError:
        logger.exception("Failed to build health response")
        raise
    response = to_starlette_response(entity)
    entity.finish()
    return response


def app_factory() -> FastAPI:
    app = FastAPI(title="httpreply", version=__version__)

    settings = get_settings()
    logging.getLogger("httpreply").setLevel(settings.log_level)
    allowed_origins = settings.allowed_origins

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials="*" not in allowed_origins,
    )

    @app.get("/health")
    async def health(request: Request) -> Response:
        return _health_response(request)

    @app.get("/healthz")
    async def healthz(request: Request) -> Response:
        return _health_response(request)

    return app


app = app_factory()
handler = Mangum(app)
