"""Build and emit a single JSON HTTP response."""

from httpreply.errors import (
    EmptyHeaderError,
    InvalidLifecycleError,
    MissingStatusCodeError,
    ResponseError,
)
from httpreply.factory import create
from httpreply.headers import HeaderBuffer
from httpreply.response import ResponseEntity, ResponseState
from httpreply.sinks import BufferedSink, StreamSink
from httpreply.status import ResponseStatus
from httpreply.transport import SentResponse

__version__ = "0.1.0"

__all__ = [
    "BufferedSink",
    "EmptyHeaderError",
    "HeaderBuffer",
    "InvalidLifecycleError",
    "MissingStatusCodeError",
    "ResponseEntity",
    "ResponseError",
    "ResponseState",
    "ResponseStatus",
    "SentResponse",
    "StreamSink",
    "create",
    "__version__",
]
