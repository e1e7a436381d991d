"""
Parser for the ``heos.message`` string.

The message is a URL-query-like list of ``key=value`` pairs joined by ``&``,
e.g. ``pid=1&name=Zone``. Values are kept as raw strings.
"""
from __future__ import annotations

from heoslink.parsing.errors import MalformedMessageError

PAIR_SEPARATOR = "&"
KEY_VALUE_SEPARATOR = "="


def parse_message(message: str) -> dict[str, str]:
    """
    Decode a message string into a key -> value mapping.

    A message with fewer than two pairs decodes to an empty mapping. Each
    pair is split on its first ``=`` only, so values may contain ``=``.
    When a key repeats, the last occurrence wins.

    Args:
        message: The raw ``heos.message`` string.

    Returns:
        A dict mapping keys to values.

    Raises:
        MalformedMessageError: If any pair lacks ``=``. No partial result
            is returned.
    """
    pairs = message.split(PAIR_SEPARATOR)
    if len(pairs) < 2:
        return {}

    parsed: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition(KEY_VALUE_SEPARATOR)
        if not sep:
            raise MalformedMessageError(message)
        parsed[key] = value
    return parsed
