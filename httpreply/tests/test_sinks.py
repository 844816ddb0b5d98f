import io

import pytest

from httpreply.errors import InvalidLifecycleError
from httpreply.factory import create
from httpreply.sinks import BufferedSink, StreamSink


def test_stream_sink_writes_cgi_style_response():
    stream = io.BytesIO()

    create(200, {"ok": True}, sink=StreamSink(stream)).send().finish()

    assert stream.getvalue() == (
        b"HTTP/1.0 200 OK\r\n"
        b"Content-Length: 11\r\n"
        b"Content-Type: application/json\r\n"
        b"\r\n"
        b'{"ok":true}'
    )


def test_stream_sink_terminates_head_without_body():
    stream = io.BytesIO()

    create(304, {"ok": True}, sink=StreamSink(stream)).send().finish()

    assert stream.getvalue() == b"HTTP/1.0 304 Not Modified\r\n\r\n"


def test_stream_sink_close_is_idempotent():
    stream = io.BytesIO()
    sink = StreamSink(stream)

    sink.close()
    sink.close()

    assert stream.getvalue() == b"\r\n"


def test_buffered_sink_rejects_writes_after_close():
    sink = BufferedSink()
    sink.send_header("HTTP/1.0 200 OK", 200)
    sink.close()

    with pytest.raises(InvalidLifecycleError):
        sink.send_header("X-Late: 1", 200)
    with pytest.raises(InvalidLifecycleError):
        sink.write_body(b"late")
    assert sink.header_lines == [("HTTP/1.0 200 OK", 200)]
