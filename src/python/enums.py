"""
Enumerations for the date/time picker using Python 3.11+ StrEnum.

This module defines string-based enumerations for the constants shared by the
value engine, the controller and the CLI tooling.
"""

from enum import StrEnum


class SelectorType(StrEnum):
    """Which wheel columns the picker shows and how its value is represented.

    Attributes:
        TIME: Hour and minute columns, value is an "HH:MM" string
        DATE: Year, month and day columns, value is a datetime at 00:00
        YEAR_MONTH: Year and month columns, value is a datetime on day 1
        DATETIME: All five columns, value is a datetime
    """
    TIME = "time"
    DATE = "date"
    YEAR_MONTH = "year-month"
    DATETIME = "datetime"


class BoundaryDirection(StrEnum):
    """Which bound the boundary resolver narrows against.

    Attributes:
        MIN: Resolve against the minimum date
        MAX: Resolve against the maximum date
    """
    MIN = "min"
    MAX = "max"


class ColumnField(StrEnum):
    """Field carried by a single wheel column."""
    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
