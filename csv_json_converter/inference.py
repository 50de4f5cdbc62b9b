from __future__ import annotations

import math
import re
import sys
from typing import Union

TypedValue = Union[None, bool, int, float, str]

# Optional minus, integer part without superfluous leading zeros, optional
# fraction. "00123" and "-01.5" stay strings so identifiers keep their zeros.
_NUMBER_RE = re.compile(r'-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?')


def _max_int_digits() -> int:
    """Longest digit string int() accepts; 0 means unlimited."""
    limit = getattr(sys, 'get_int_max_str_digits', None)
    return limit() if limit else 0


def _to_number(raw: str) -> TypedValue:
    """Numeric value for a grammar-matching field, or the raw text when the
    number cannot round-trip through JSON (too many digits, overflows float).
    """
    if '.' in raw:
        value = float(raw)
        return value if math.isfinite(value) else raw
    limit = _max_int_digits()
    if limit and len(raw.lstrip('-')) > limit:
        return raw
    return int(raw)


def infer_value(raw: str) -> TypedValue:
    """Classify a raw field; first match wins: bool, null, number, string."""
    lowered = raw.lower()
    if lowered == 'true':
        return True
    if lowered == 'false':
        return False
    if raw == '':
        return None
    if _NUMBER_RE.fullmatch(raw):
        return _to_number(raw)
    return raw


def coerce_field(raw: str, infer_types: bool) -> TypedValue:
    return infer_value(raw) if infer_types else raw
