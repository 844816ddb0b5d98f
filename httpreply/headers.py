"""Raw header accumulation and duplicate resolution."""

from __future__ import annotations

from typing import Mapping, Sequence, Union

from httpreply.errors import EmptyHeaderError

CRLF = "\r\n"

HeaderInput = Union[str, Sequence[str], None]
HeaderKey = Union[int, str]


def _normalize(header: HeaderInput) -> str:
    if not header:
        raise EmptyHeaderError("An attempt to set an empty header")
    if isinstance(header, str):
        return header + CRLF
    return CRLF.join(header) + CRLF


class HeaderBuffer:
    """Append-only buffer of raw ``Name: Value`` lines.

    Lines are never removed once appended. A name may appear several times;
    which occurrence wins is decided by :func:`resolve_value` when the buffer
    is emitted.
    """

    def __init__(self, header: HeaderInput = None) -> None:
        self._text = ""
        if header is not None:
            self.append(header)

    def append(self, header: HeaderInput) -> None:
        self._text += _normalize(header)

    @property
    def text(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text

    def __bool__(self) -> bool:
        return bool(self._text)


def resolve_value(value: str | list[str]) -> str:
    """Pick the visible value of a header that may have been set repeatedly.

    The occurrence at ``count - 2`` wins when it exists, otherwise the first
    one. With two occurrences this keeps the earlier value, so a header set
    by the caller before sending overrides the one added automatically.
    """

    if isinstance(value, str):
        return value
    index = len(value) - 2
    return value[index] if 0 <= index < len(value) else value[0]


def format_line(key: HeaderKey, value: str) -> str:
    if isinstance(key, int):
        return value
    return f"{key}: {value}"


def named_headers(headers: Mapping[HeaderKey, str | list[str]]) -> dict[str, str]:
    """Return only the ``Name: Value`` entries, dropping positional lines."""

    return {
        key: resolve_value(value)
        for key, value in headers.items()
        if isinstance(key, str)
    }
