"""
Type definitions for the date/time picker.

This module defines common types, aliases, and TypedDict structures
used throughout the picker codebase.
"""

import datetime as dt
from typing import Callable, Protocol, Sequence, TypedDict

# Value aliases
TimeValue = str                            # "HH:MM"
PickerValue = str | dt.datetime            # TimeValue for type=time, datetime otherwise
ColumnValues = list[str]                   # Zero-padded strings of one column


# Configuration TypedDict definitions
class PickerConfig(TypedDict, total=False):
    """Picker section of config.json."""
    type: str
    minDate: str
    maxDate: str
    minHour: int
    maxHour: int
    minMinute: int
    maxMinute: int
    yearSpan: int


class LoggingConfig(TypedDict, total=False):
    """Logging section of config.json."""
    level: str
    file: str
    maxBytes: int
    backupCount: int
    console: bool
    consoleLevel: str
    raiseOnError: bool


# Callback type aliases
FilterCallback = Callable[[str, ColumnValues], ColumnValues]   # (field, values) -> values
FormatterCallback = Callable[[str, str], str]                  # (field, value) -> display


# Protocol definitions
class WheelPickerProtocol(Protocol):
    """Protocol for the scroll-wheel widget that renders the columns.

    The widget owns index tracking, scrolling and rendering; the picker
    engine only feeds it columns and positions and reads the selection back.
    """

    def set_columns(self, columns: Sequence[Sequence[str]]) -> None:
        """Replace the display values of every column."""
        ...

    def get_selected_indexes(self) -> list[int]:
        """Return the selected index of each column."""
        ...

    def get_selected_values(self) -> list[str]:
        """Return the display value at the selected index of each column."""
        ...

    def set_column_positions(self, values: Sequence[str]) -> None:
        """Scroll each column to the entry matching the given display value."""
        ...
