"""
Lenient value parsers shared by the listing and import code paths.

All helpers are pure: bad input maps to None (or the given default), never to an error.
"""

import re
from typing import Any, Optional

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

# Integers are stored and bound as signed 64-bit values
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def parse_optional_str(raw: str) -> Optional[str]:
    """Return None for an empty string, otherwise the string unchanged."""
    if raw == "":
        return None
    return raw


def parse_optional_int(raw: Any) -> Optional[int]:
    """
    Parse a base-10 integer.

    Returns None when the value is absent, empty, not a plain integer literal
    (optional sign followed by ASCII digits, no surrounding whitespace) or
    outside the signed 64-bit range.
    """
    if raw is None:
        return None
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str) and _INT_PATTERN.fullmatch(raw):
        value = int(raw)
    else:
        return None

    if value < INT64_MIN or value > INT64_MAX:
        return None
    return value


def parse_int_or_default(raw: Any, default: int) -> int:
    """Parse an integer, falling back to default when it cannot be parsed."""
    value = parse_optional_int(raw)
    return default if value is None else value
