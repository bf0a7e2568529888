"""
Boundary resolution for the calendar wheels.

For a reference value and a bound, the resolver computes the tightest legal
limit of every field. A field is narrowed to the bound's field only when every
higher-order field of the reference value equals the bound, so e.g. with a
minimum of 2020-01-15 the day wheel of January 2020 starts at 15 while the day
wheel of February 2020 starts at 1.
"""

import datetime as dt
from dataclasses import dataclass

from date_utils import last_day_of_month
from enums import BoundaryDirection


@dataclass(frozen=True)
class BoundaryTuple:
    """Per-field limit for one direction (min or max)."""
    year: int
    month: int
    day: int
    hour: int
    minute: int


def resolve_boundary(direction: BoundaryDirection, value: dt.datetime,
                     bound: dt.datetime) -> BoundaryTuple:
    """Resolve the per-field limit of `value` against `bound`.

    Args:
        direction: BoundaryDirection.MIN when `bound` is the minimum date,
            BoundaryDirection.MAX when it is the maximum date
        value: Current (corrected) picker value
        bound: The min or max date

    Returns:
        BoundaryTuple holding the lower (MIN) or upper (MAX) limit of each field
    """
    year = bound.year

    if direction is BoundaryDirection.MAX:
        month = 12
        day = last_day_of_month(value.year, value.month)
        hour = 23
        minute = 59
    else:
        month = 1
        day = 1
        hour = 0
        minute = 0

    if value.year == year:
        month = bound.month
        if value.month == month:
            day = bound.day
            if value.day == day:
                hour = bound.hour
                if value.hour == hour:
                    minute = bound.minute

    return BoundaryTuple(year=year, month=month, day=day, hour=hour, minute=minute)
