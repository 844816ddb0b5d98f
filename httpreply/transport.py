"""Parsed record of a response handed to the transport."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field

from httpreply.headers import HeaderKey


class SentResponse(BaseModel):
    """Status, body and headers of a response as the transport saw them.

    Until the engine resolves them, repeated header names hold a list of
    values in the order they were appended.
    """

    status_code: int
    raw_body: str = ""
    headers: dict[Union[int, str], Union[str, list[str]]] = Field(default_factory=dict)


def parse_headers(raw_headers: str) -> dict[HeaderKey, str | list[str]]:
    """Parse raw header text into an ordered mapping.

    Lines without a ``:`` (the status line) are keyed by their position.
    Lines starting with a tab continue the previous header.
    """

    headers: dict[HeaderKey, str | list[str]] = {}
    last_key: HeaderKey | None = None
    for position, line in enumerate(raw_headers.split("\n")):
        if not line.strip():
            continue
        if line.startswith("\t") and last_key is not None:
            _continue_value(headers, last_key, line.strip())
            continue
        name, sep, value = line.partition(":")
        if not sep:
            headers[position] = line.strip()
            last_key = position
            continue

        name = name.strip()
        value = value.strip()
        existing = headers.get(name)
        if existing is None:
            headers[name] = value
        elif isinstance(existing, list):
            existing.append(value)
        else:
            headers[name] = [existing, value]
        last_key = name
    return headers


def _continue_value(headers: dict, key: HeaderKey, fragment: str) -> None:
    current = headers[key]
    if isinstance(current, list):
        current[-1] = f"{current[-1]}\r\n\t{fragment}"
    else:
        headers[key] = f"{current}\r\n\t{fragment}"


def build_sent_response(status_code: int, body: str, raw_headers: str) -> SentResponse:
    """Hand a response to the transport and return what it recorded."""

    return SentResponse(
        status_code=status_code,
        raw_body=body,
        headers=parse_headers(raw_headers),
    )
