"""
Value correction: turn any input into a value inside the picker's bounds.

Malformed input never raises. A bad time string is clamped field by field and
a non-date input falls back to the minimum date.
"""

import datetime as dt
import logging
from typing import Any

from custom_types import PickerValue
from date_utils import clamp_field, pad_zero
from picker_settings import PickerSettings

logger = logging.getLogger(__name__)


def _correct_time(value: Any, settings: PickerSettings) -> str:
    if isinstance(value, dt.time):
        value = f"{pad_zero(value.hour)}:{pad_zero(value.minute)}"
    elif not value:
        value = f"{pad_zero(settings.min_hour)}:00"

    parts = str(value).split(":")
    hour = clamp_field(parts[0], settings.min_hour, settings.max_hour)
    minute = clamp_field(parts[1] if len(parts) > 1 else None,
                         settings.min_minute, settings.max_minute)
    return f"{hour}:{minute}"


def _as_datetime(value: Any) -> dt.datetime | None:
    if isinstance(value, dt.datetime):
        return value
    if isinstance(value, dt.date):
        return dt.datetime.combine(value, dt.time())
    return None


def _correct_date(value: Any, settings: PickerSettings) -> dt.datetime:
    moment = _as_datetime(value)
    if moment is None:
        logger.debug("Not a date value (%r), using min date %s", value, settings.min_date)
        return settings.min_date

    corrected = max(settings.min_date, min(settings.max_date, moment))
    if corrected != moment:
        logger.debug("Clamped %s into [%s, %s] -> %s",
                     moment, settings.min_date, settings.max_date, corrected)
    return corrected


def correct_value(value: Any, settings: PickerSettings) -> PickerValue:
    """Return `value` corrected into the bounds described by `settings`.

    For type=time the result is an "HH:MM" string with hour in
    [min_hour, max_hour] and minute in [min_minute, max_minute]. For the
    calendar types the result is a datetime in [min_date, max_date].
    """
    if settings.is_time:
        return _correct_time(value, settings)
    return _correct_date(value, settings)
