"""Environment configuration helpers."""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel

DEFAULT_PROTOCOL = "HTTP/1.0"


def _parse_allowed_origins(raw_origins: str | None) -> list[str]:
    if not raw_origins:
        return ["*"]
    if raw_origins.strip() == "*":
        return ["*"]
    return [origin.strip() for origin in raw_origins.split(",") if origin.strip()]


class Settings(BaseModel):
    server_protocol: str | None = None
    default_protocol: str = DEFAULT_PROTOCOL
    log_level: str = "INFO"
    allowed_origins: list[str] = ["*"]

    @property
    def protocol_version(self) -> str:
        """Protocol of the current request, as reported by the web server."""

        return self.server_protocol or self.default_protocol


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        server_protocol=os.environ.get("SERVER_PROTOCOL") or None,
        default_protocol=os.environ.get("HTTPREPLY_DEFAULT_PROTOCOL") or DEFAULT_PROTOCOL,
        log_level=(os.environ.get("HTTPREPLY_LOG_LEVEL") or "INFO").upper(),
        allowed_origins=_parse_allowed_origins(os.environ.get("ALLOWED_ORIGINS")),
    )
