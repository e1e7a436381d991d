"""
Exception hierarchy for HEOS response decoding.

Every failure raised while decoding a device response derives from
``DecodeError`` so callers can catch a single type.
"""
from __future__ import annotations

import json
from typing import Any


def _render(value: Any) -> str:
    try:
        return json.dumps(value)
    except (TypeError, ValueError):
        return repr(value)


class DecodeError(Exception):
    """Base class for all response decoding failures."""
    pass


class EnvelopeError(DecodeError):
    """Raised when the response is not valid JSON or has the wrong shape."""
    pass


class CommandPathError(DecodeError):
    """Raised when a command path has fewer than two ``/`` separated segments."""

    def __init__(self, path: str) -> None:
        super().__init__(f"malformed command path: {path!r}")
        self.path = path


class MalformedMessageError(DecodeError):
    """Raised when a message pair lacks the ``=`` separator."""

    def __init__(self, message: str) -> None:
        super().__init__(f"malformed message: {message}")
        self.message = message


class PayloadTypeError(DecodeError):
    """Raised when a payload value is neither a string nor a number."""

    def __init__(self, key: str, value: Any) -> None:
        super().__init__(f"key {key}: value not string nor number: {_render(value)}")
        self.key = key
        self.value = value
