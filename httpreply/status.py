"""Status variants a response can be created with."""

from __future__ import annotations

from enum import Enum


class ResponseStatus(Enum):
    OK = (200, "OK", False)
    PARTIAL_CONTENT = (206, "Partial Content", False)
    NOT_MODIFIED = (304, "Not Modified", True)
    UNAUTHORIZED = (401, "Unauthorized", False)
    NOT_FOUND = (404, "Not Found", False)
    METHOD_NOT_ALLOWED = (405, "Method Not Allowed", False)
    INTERNAL_SERVER_ERROR = (500, "Internal Server Error", True)

    def __init__(self, code: int, reason: str, suppresses_payload: bool) -> None:
        self.code = code
        self.reason = reason
        self.suppresses_payload = suppresses_payload

    def status_line(self, protocol_version: str) -> str:
        return f"{protocol_version} {self.code} {self.reason}"

    @classmethod
    def lookup(cls, status_code: int) -> ResponseStatus | None:
        """Return the variant for ``status_code`` or ``None`` if there is none."""

        return _BY_CODE.get(status_code)


_BY_CODE = {status.code: status for status in ResponseStatus}
