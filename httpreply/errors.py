"""Exceptions raised while building and emitting a response."""

from __future__ import annotations


class ResponseError(Exception):
    """Base class for response construction failures."""


class EmptyHeaderError(ResponseError, ValueError):
    """Raised when an attempt is made to append an empty header."""


class MissingStatusCodeError(ResponseError, RuntimeError):
    """Raised when a response is sent without a concrete status code."""


class InvalidLifecycleError(ResponseError, RuntimeError):
    """Raised when a lifecycle step is invoked out of order."""
