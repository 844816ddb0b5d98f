"""Response entity: header accumulation and the send/finish lifecycle."""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any, Callable, Mapping

from httpreply.config import get_settings
from httpreply.errors import InvalidLifecycleError, MissingStatusCodeError
from httpreply.headers import CRLF, HeaderBuffer, HeaderInput, format_line, resolve_value
from httpreply.sinks import BufferedSink, ResponseSink
from httpreply.status import ResponseStatus
from httpreply.transport import SentResponse, build_sent_response

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


class ResponseState(str, Enum):
    UNSENT = "unsent"
    SENT = "sent"
    FINISHED = "finished"


def serialize_payload(payload: Mapping[str, Any]) -> str:
    """Serialize a result mapping to compact JSON text."""

    return json.dumps(payload, separators=(",", ":"))


class ResponseEntity:
    """A single outgoing response.

    ``send`` writes the status line, headers and body to ``sink`` and stores
    what the transport recorded; ``finish`` then runs the terminator once.
    Headers appended before ``send`` are emitted with it.

    Example::

        create(200, {"ok": True}).send().finish()
    """

    status: ResponseStatus | None = None

    def __init__(
        self,
        result: Mapping[str, Any] | None = None,
        *,
        status: ResponseStatus | None = None,
        headers: HeaderBuffer | None = None,
        protocol_version: str | None = None,
        sink: ResponseSink | None = None,
        terminator: Callable[[], None] | None = None,
    ) -> None:
        if status is not None:
            self.status = status
        self.result = result if result is not None else {}
        self.protocol_version = protocol_version or get_settings().protocol_version
        self.headers = headers if headers is not None else HeaderBuffer()
        self.sink = sink if sink is not None else BufferedSink()
        self.state = ResponseState.UNSENT
        self.response: SentResponse | None = None
        self.finish_action: Callable[[], None] | None = None
        self._terminator = terminator

    @property
    def status_code(self) -> int | None:
        return self.status.code if self.status is not None else None

    def append_header(self, header: HeaderInput) -> None:
        """Append one header line, or several from a sequence of lines."""

        self.headers.append(header)

    def get_defined_headers(self) -> str:
        return self.headers.text

    def get_response(self) -> SentResponse | None:
        return self.response

    def send(self) -> ResponseEntity:
        status = self.status
        if status is None or not isinstance(status.code, int):
            raise MissingStatusCodeError("Response status code is not set")
        if self.state is not ResponseState.UNSENT:
            raise InvalidLifecycleError("Response has already been sent")

        result = None if status.suppresses_payload else self.result
        lines = [status.status_line(self.protocol_version)]

        body = ""
        if result:
            body = serialize_payload(result)
            lines.append(f"Content-Length: {len(body)}")
            lines.append(f"Content-Type: {JSON_CONTENT_TYPE}")

        # Nothing on the entity or the buffer changes until the sink accepted everything.
        raw_headers = self.headers.text + "".join(line + CRLF for line in lines)
        sent = build_sent_response(status.code, body, raw_headers.strip())
        self._send_headers(sent)
        if body:
            self.sink.write_body(body.encode("utf-8"))

        self.headers.append(lines)
        self.result = result
        self.response = sent
        self.finish_action = self._terminator or self.sink.close
        self.state = ResponseState.SENT
        logger.info("Sent %s response with %d byte body", status.code, len(body))
        return self

    def _send_headers(self, sent: SentResponse) -> None:
        headers = sent.headers
        for key, value in headers.items():
            resolved = resolve_value(value)
            if resolved is not value:
                logger.debug("Header %s set %d times, emitting %r", key, len(value), resolved)
            headers[key] = resolved
            self.sink.send_header(format_line(key, resolved), sent.status_code)

    def finish(self) -> None:
        """End handling of this response by running its terminator."""

        if self.state is not ResponseState.SENT or self.finish_action is None:
            raise InvalidLifecycleError(
                f"Cannot finish a response that is {self.state.value}"
            )
        self.state = ResponseState.FINISHED
        self.finish_action()
