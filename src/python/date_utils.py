"""
Numeric and calendar helpers for the picker wheels.

Clamping here never raises: malformed input degrades to the low end of the
range so callers can feed raw wheel or user strings straight in.
"""

import calendar
from typing import Any, Callable, TypeVar

T = TypeVar("T")


def pad_zero(num: int | str, width: int = 2) -> str:
    """Left-pad a number with zeros to `width` characters."""
    return str(num).rjust(width, "0")


def parse_int(raw: Any) -> int | None:
    """Parse `raw` as an integer, or return None when it is not numeric."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except (TypeError, ValueError):
        pass
    try:
        # "9.5" style input truncates like a numeric coercion would
        return int(float(str(raw).strip()))
    except (TypeError, ValueError, OverflowError):
        return None


def clamp(raw: Any, low: int, high: int) -> int:
    """Parse `raw` as an integer and clamp it into [low, high].

    Unparseable input (None, "", "ab", "nan") degrades to `low`.
    """
    value = parse_int(raw)
    if value is None:
        return low
    return max(low, min(high, value))


def clamp_field(raw: Any, low: int, high: int) -> str:
    """Clamp `raw` into [low, high] and return it as a two-digit string."""
    return pad_zero(clamp(raw, low, high))


def last_day_of_month(year: int, month: int) -> int:
    """Number of days in the given month, leap years included.

    Months outside 1-12 are clamped into range.
    """
    return calendar.monthrange(year, max(1, min(12, month)))[1]


def times(count: int, fn: Callable[[int], T]) -> list[T]:
    """Build a list of `count` items by calling `fn` with each index."""
    return [fn(index) for index in range(count)]
