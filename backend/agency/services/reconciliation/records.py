# backend/agency/services/reconciliation/records.py
"""
Field accessors for raw booking/staff documents.

Documents come straight from the store as loosely-typed mappings, so every
accessor degrades to an empty/zero value instead of raising.
"""

import math
import re
from collections.abc import Mapping
from typing import Any

# Leading float literal, as JS parseFloat reads it
_FLOAT_PREFIX = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def dates_needed(booking: Any) -> list:
    """booking.datesNeeded as a list ([] if absent or not a sequence)."""
    if not isinstance(booking, Mapping):
        return []
    value = booking.get("datesNeeded")
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def staff_count(entry: Any) -> int:
    """Required staff for a date entry. Non-numeric → 0, fractions truncated."""
    if not isinstance(entry, Mapping):
        return 0
    value = entry.get("staffCount")

    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    if isinstance(value, str):
        try:
            return int(float(value.strip()))
        except (ValueError, OverflowError):
            return 0
    return 0


def assigned_staff_ids(entry: Any) -> list:
    """
    Truthy entries of staffIds (empty/None slots are unfilled placeholders).

    Ids are returned as hashable keys: str/int as-is, anything else as str().
    """
    if not isinstance(entry, Mapping):
        return []
    value = entry.get("staffIds")
    if not isinstance(value, (list, tuple)):
        return []
    return [
        sid if isinstance(sid, (str, int)) else str(sid)
        for sid in value
        if sid
    ]


def entry_date(entry: Any) -> str | None:
    """The YYYY-MM-DD date string of an entry, or None."""
    if not isinstance(entry, Mapping):
        return None
    value = entry.get("date")
    if isinstance(value, str) and value:
        return value
    return None


def get_field(record: Any, name: str, default: Any = None) -> Any:
    if not isinstance(record, Mapping):
        return default
    return record.get(name, default)


def parse_number(value: Any) -> float | None:
    """
    Parse a number the way the dashboard parses rates (parseFloat):
    numbers as-is, strings by their longest leading float literal
    ("22/hr" → 22.0, "1.5e1" → 15.0). Non-finite or too large → None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        try:
            value = float(value)
        except OverflowError:
            return None
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if not isinstance(value, str):
        return None

    match = _FLOAT_PREFIX.match(value.strip())
    if not match:
        return None
    number = float(match.group(0))
    return number if math.isfinite(number) else None


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positives (dashboard percentage rounding)."""
    return int(math.floor(value + 0.5))
