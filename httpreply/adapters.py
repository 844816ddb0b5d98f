"""Convert a sent response into the shapes web frameworks expect."""

from __future__ import annotations

from typing import Any, Mapping

from starlette.responses import Response

from httpreply.config import DEFAULT_PROTOCOL
from httpreply.errors import InvalidLifecycleError
from httpreply.headers import named_headers
from httpreply.response import ResponseEntity
from httpreply.transport import SentResponse


def _sent(entity: ResponseEntity) -> SentResponse:
    sent = entity.get_response()
    if sent is None:
        raise InvalidLifecycleError("Response has not been sent yet")
    return sent


def protocol_from_scope(scope: Mapping[str, Any]) -> str:
    """Return the protocol version of an ASGI request scope."""

    http_version = scope.get("http_version")
    if not http_version:
        return DEFAULT_PROTOCOL
    return f"HTTP/{http_version}"


def to_proxy_response(entity: ResponseEntity) -> dict[str, Any]:
    """Return a response compatible with API Gateway Lambda proxy."""

    sent = _sent(entity)
    return {
        "statusCode": sent.status_code,
        "headers": named_headers(sent.headers),
        "body": sent.raw_body,
    }


def to_starlette_response(entity: ResponseEntity) -> Response:
    sent = _sent(entity)
    return Response(
        content=sent.raw_body,
        status_code=sent.status_code,
        headers=named_headers(sent.headers),
    )
