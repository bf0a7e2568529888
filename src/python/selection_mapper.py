"""Map selected wheel indexes back to a raw picker value."""

import datetime as dt
import logging
from typing import Sequence

from column_builder import Column
from custom_types import PickerValue
from date_utils import last_day_of_month, parse_int
from enums import SelectorType

logger = logging.getLogger(__name__)


def map_selection(selector_type: SelectorType, indexes: Sequence[int],
                  columns: Sequence[Column]) -> PickerValue | None:
    """Read the origin values at `indexes` and compose a raw value.

    Lookup is positional on each column's origin values, never on display
    strings. The day is clamped to the selected month's last day so a stale
    day of 31 can never produce February 31st. The result is not bounded yet;
    pass it through correct_value() before adopting it.

    Args:
        selector_type: Picker type
        indexes: Selected index per column, as reported by the wheel
        columns: Columns the wheel was showing

    Returns:
        "HH:MM" for type=time, otherwise a datetime, or None when a
        calendar field is not a usable number (a filter replaced it)
    """
    if selector_type is SelectorType.TIME:
        hour = columns[0].values[indexes[0]]
        minute = columns[1].values[indexes[1]]
        return f"{hour}:{minute}"

    year = parse_int(columns[0].values[indexes[0]])
    month = parse_int(columns[1].values[indexes[1]])

    day = 1
    if selector_type is not SelectorType.YEAR_MONTH:
        day = parse_int(columns[2].values[indexes[2]])

    hour = 0
    minute = 0
    if selector_type is SelectorType.DATETIME:
        hour = parse_int(columns[3].values[indexes[3]])
        minute = parse_int(columns[4].values[indexes[4]])

    fields = (year, month, day, hour, minute)
    if None in fields or not (dt.MINYEAR <= year <= dt.MAXYEAR and 1 <= month <= 12):
        logger.debug("Unusable calendar selection %s, leaving it to the corrector", fields)
        return None

    month_end = last_day_of_month(year, month)
    if day > month_end:
        logger.debug("Day %d past end of %d-%02d, using %d", day, year, month, month_end)
        day = month_end

    try:
        return dt.datetime(year, month, day, hour, minute)
    except ValueError:
        logger.debug("Out-of-range calendar selection %s, leaving it to the corrector", fields)
        return None
