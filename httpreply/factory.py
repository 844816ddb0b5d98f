"""Create a response for a numeric status code."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from httpreply.headers import HeaderBuffer
from httpreply.response import ResponseEntity
from httpreply.sinks import ResponseSink
from httpreply.status import ResponseStatus

logger = logging.getLogger(__name__)


def create(
    status_code: int,
    result: Mapping[str, Any] | None = None,
    *,
    headers: HeaderBuffer | None = None,
    protocol_version: str | None = None,
    sink: ResponseSink | None = None,
    terminator: Callable[[], None] | None = None,
) -> ResponseEntity:
    """Return a response of the variant matching ``status_code``.

    Codes without a dedicated variant get a 200 response instead of an error.
    """

    status = ResponseStatus.lookup(status_code)
    if status is None:
        logger.debug("No response variant for status %s, using 200", status_code)
        status = ResponseStatus.OK

    return ResponseEntity(
        result,
        status=status,
        headers=headers,
        protocol_version=protocol_version,
        sink=sink,
        terminator=terminator,
    )
