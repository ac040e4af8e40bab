"""Small string helpers."""

from __future__ import annotations

import re

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1
ELLIPSIS = "…"


def parse_int_or_default(text: str, default: int) -> int:
    """Parse a plain decimal integer, returning ``default`` if it is not one.

    Only an optional sign followed by ASCII digits is accepted, and the value
    must fit in a signed 64-bit integer.
    """
    if not isinstance(text, str) or _INT_RE.fullmatch(text) is None:
        return default
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        return default
    return value


def truncate(text: str, limit: int) -> str:
    """Trim ``text`` to at most ``limit`` characters, ending in an ellipsis if cut."""
    if limit <= 0 or not text:
        return ""
    if len(text) <= limit:
        return text
    if limit <= 1:
        return ELLIPSIS
    return text[: limit - 1] + ELLIPSIS