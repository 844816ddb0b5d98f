"""Destinations a sent response is written to."""

from __future__ import annotations

import logging
from typing import BinaryIO, Protocol

from httpreply.errors import InvalidLifecycleError

logger = logging.getLogger(__name__)


class ResponseSink(Protocol):
    def send_header(self, line: str, status_code: int) -> None: ...

    def write_body(self, data: bytes) -> None: ...

    def close(self) -> None: ...


class BufferedSink:
    """Keep emitted header lines and body bytes in memory."""

    def __init__(self) -> None:
        self.header_lines: list[tuple[str, int]] = []
        self._body = bytearray()
        self.closed = False

    def _check_open(self) -> None:
        if self.closed:
            raise InvalidLifecycleError("Response output is already closed")

    def send_header(self, line: str, status_code: int) -> None:
        self._check_open()
        self.header_lines.append((line, status_code))

    def write_body(self, data: bytes) -> None:
        self._check_open()
        self._body.extend(data)

    @property
    def body(self) -> bytes:
        return bytes(self._body)

    def close(self) -> None:
        self.closed = True


class StreamSink(BufferedSink):
    """Write a CGI-style response to a binary stream such as stdout."""

    def __init__(self, stream: BinaryIO) -> None:
        super().__init__()
        self._stream = stream
        self._head_terminated = False

    def send_header(self, line: str, status_code: int) -> None:
        super().send_header(line, status_code)
        self._stream.write(line.encode("latin-1") + b"\r\n")

    def _terminate_head(self) -> None:
        if not self._head_terminated:
            self._stream.write(b"\r\n")
            self._head_terminated = True

    def write_body(self, data: bytes) -> None:
        super().write_body(data)
        self._terminate_head()
        self._stream.write(data)

    def close(self) -> None:
        if self.closed:
            return
        self._terminate_head()
        self._stream.flush()
        logger.debug("Flushed response stream after %d header lines", len(self.header_lines))
        super().close()
