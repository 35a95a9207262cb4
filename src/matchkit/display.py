"""Render values for embedding in failure messages."""

import re
from typing import Any

from matchkit.config import get_settings

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _truncate(value: str, max_len: int) -> str:
    if max_len and len(value) > max_len:
        return value[:max_len] + "..."
    return value


def _quote(value: str) -> str:
    escaped = "".join(_ESCAPES.get(ch, ch) for ch in value)
    return f'"{escaped}"'


def display_string(value: Any) -> str:
    """Format ``value`` for a human-readable failure message.

    Parameters
    ----------
    value : Any
        Value to render. ``None`` and the empty string get explicit markers so
        they cannot be confused with whitespace in a message.

    Returns
    -------
    str
        Display form of the value.

    Examples
    --------
    >>> display_string(None)
    '<null>'
    >>> display_string("a\\nb")
    '"a\\\\nb"'
    >>> display_string(("x", "y"))
    '["x", "y"]'
    """
    if value is None:
        return "<null>"
    if isinstance(value, str):
        if value == "":
            return "<empty string>"
        return _quote(_truncate(value, get_settings().display_max_length))
    if isinstance(value, (list, tuple, set, frozenset)):
        return "[" + ", ".join(display_string(item) for item in value) + "]"
    if isinstance(value, re.Pattern):
        return str(value.pattern)
    return repr(value)
