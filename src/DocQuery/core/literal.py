"""Classify raw literal text into a typed scalar.

Values typed into a filter field arrive as text. `parse_literal` turns them
into the most specific scalar, checking in this order:

1. number: optional sign, ASCII digits, optional fraction (whitespace around it is
   ignored)
2. `null` / `true` / `false`
3. anything else is returned exactly as given

Quoted text keeps its quotes; there is no unquoting here.
"""

from __future__ import annotations

import re

from DocQuery.core.query import Value


_RE_NUMBER = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
_KEYWORDS: dict[str, Value] = {
    "null": None,
    "true": True,
    "false": False,
}


def parse_literal(text: str) -> Value:
    """Parse literal text into null, boolean, number or string.

    Args:
        text: Raw user input.

    Returns:
        The parsed scalar. Text that is neither numeric nor a keyword is
        returned unchanged, including surrounding whitespace.
    """
    trimmed = text.strip()
    if _RE_NUMBER.fullmatch(trimmed):
        return _to_number(trimmed)
    if trimmed in _KEYWORDS:
        return _KEYWORDS[trimmed]
    return text


def _to_number(text: str) -> int | float:
    if "." in text:
        return float(text)
    return int(text)
