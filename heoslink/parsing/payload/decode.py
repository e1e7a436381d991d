"""
Normalizer for the ``payload`` array of a HEOS response.

Payload entries are flat JSON objects whose values are strings or numbers.
Every value is coerced to a string so callers deal with one type only.
"""
from __future__ import annotations

import math
from decimal import Decimal
from typing import Any

from heoslink.parsing.errors import EnvelopeError, PayloadTypeError


def format_number(value: int | float) -> str:
    """
    Render a JSON number as the shortest decimal that round-trips its double.

    The output is positional (never exponent notation) with no trailing
    zeros, e.g. ``1.5 -> "1.5"``, ``2.0 -> "2"``, ``1e21 ->
    "1000000000000000000000"``.

    Raises:
        OverflowError: If the value does not fit in a finite double.
    """
    number = float(value)
    if not math.isfinite(number):
        raise OverflowError(f"number out of range: {value!r}")
    # repr() already yields the shortest round-trip digits.
    return format(Decimal(repr(number)).normalize(), "f")


def _normalize_value(key: str, value: Any) -> str:
    if isinstance(value, str):
        return value
    # bool is an int subclass and must be rejected explicitly.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PayloadTypeError(key, value)
    try:
        return format_number(value)
    except OverflowError as exc:
        raise EnvelopeError(f"key {key}: {exc}") from exc


def parse_payload(entries: Any) -> list[dict[str, str]]:
    """
    Coerce every value of every payload entry to a string.

    Args:
        entries: The decoded JSON array, a list of dicts.

    Returns:
        A list of string -> string dicts in the original order.

    Raises:
        EnvelopeError: If ``entries`` is not a list of objects.
        PayloadTypeError: If a value is neither a string nor a number
            (booleans, ``null``, objects and arrays). No partial result is
            returned.
    """
    if not isinstance(entries, list):
        raise EnvelopeError(f"payload must be an array, got {type(entries).__name__}")

    normalized: list[dict[str, str]] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise EnvelopeError(f"payload[{index}] must be an object, got {type(entry).__name__}")
        normalized.append({key: _normalize_value(key, value) for key, value in entry.items()})
    return normalized
