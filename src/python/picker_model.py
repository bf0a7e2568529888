"""
DateTimePickerModel: the single bounded value behind a date/time wheel picker.

The model owns the settings and the adopted (always corrected) value. Ranges,
columns and wheel positions are pure functions of the two and are derived on
demand; compute_columns() memoizes them on (settings, value).
"""

import logging
from typing import Any, Sequence

from boundary_resolver import BoundaryTuple, resolve_boundary
from column_builder import Column, FieldRange, build_ranges, compute_columns
from custom_types import PickerValue
from date_utils import pad_zero
from enums import BoundaryDirection, ColumnField, SelectorType
from picker_settings import PickerSettings
from selection_mapper import map_selection
from value_corrector import correct_value

logger = logging.getLogger(__name__)


def column_positions(value: PickerValue, settings: PickerSettings) -> list[str]:
    """Decompose `value` into one display string per active column.

    These are the entries the wheel should scroll to; they go through the
    same formatter as the column display values.
    """
    fmt = settings.formatter

    if settings.is_time:
        hour, minute = str(value).split(":")
        return [fmt(ColumnField.HOUR.value, hour), fmt(ColumnField.MINUTE.value, minute)]

    positions = [
        fmt(ColumnField.YEAR.value, str(value.year)),
        fmt(ColumnField.MONTH.value, pad_zero(value.month)),
        fmt(ColumnField.DAY.value, pad_zero(value.day)),
    ]

    if settings.selector_type is SelectorType.DATETIME:
        positions.append(fmt(ColumnField.HOUR.value, pad_zero(value.hour)))
        positions.append(fmt(ColumnField.MINUTE.value, pad_zero(value.minute)))
    elif settings.selector_type is SelectorType.YEAR_MONTH:
        positions = positions[:2]

    return positions


class DateTimePickerModel:
    """Hold a picker value that always lies within the configured bounds."""

    settings: PickerSettings
    _value: PickerValue

    def __init__(self, settings: PickerSettings | None = None, value: Any = None) -> None:
        """Initialize the model.

        Args:
            settings: Picker settings; defaults to PickerSettings()
            value: Initial value; corrected, falls back to the minimum bound
        """
        self.settings = settings if settings is not None else PickerSettings()
        self._value = correct_value(value, self.settings)
        logger.debug("DateTimePickerModel initialized: type=%s, value=%s",
                     self.settings.selector_type, self._value)

    @property
    def value(self) -> PickerValue:
        """The adopted, corrected value."""
        return self._value

    def _adopt(self, value: PickerValue) -> bool:
        if value == self._value:
            return False
        logger.debug("Value changed from %s to %s", self._value, value)
        self._value = value
        return True

    def set_value(self, value: Any) -> bool:
        """Correct `value` and adopt it.

        Returns:
            True if the adopted value changed
        """
        return self._adopt(correct_value(value, self.settings))

    def select(self, indexes: Sequence[int]) -> bool:
        """Adopt the value described by the selected wheel indexes.

        Args:
            indexes: Selected index of each column, matching `columns`

        Returns:
            True if the adopted value changed
        """
        raw = map_selection(self.settings.selector_type, indexes, self.columns)
        return self._adopt(correct_value(raw, self.settings))

    def update_settings(self, **changes: Any) -> bool:
        """Replace settings fields and re-correct the value against them.

        Switching between type=time and a calendar type invalidates the
        current value's shape, so the value restarts from the new minimum.

        Returns:
            True if the adopted value changed
        """
        previous = self.settings
        self.settings = previous.with_changes(**changes)
        logger.debug("Settings updated: %s", ", ".join(sorted(changes)))

        value: Any = self._value
        if previous.is_time != self.settings.is_time:
            value = None
        return self._adopt(correct_value(value, self.settings))

    def get_boundary(self, direction: BoundaryDirection) -> BoundaryTuple:
        """Boundary of the current value against min_date or max_date."""
        if self.settings.is_time:
            raise ValueError("Boundaries only apply to calendar picker types")
        return resolve_boundary(direction, self._value, self.settings.bound(direction))

    @property
    def ranges(self) -> list[FieldRange]:
        return build_ranges(self.settings, self._value)

    @property
    def columns(self) -> tuple[Column, ...]:
        return compute_columns(self.settings, self._value)

    @property
    def display_columns(self) -> list[list[str]]:
        """Display values of every column, as handed to the wheel."""
        return [list(column.display) for column in self.columns]

    @property
    def positions(self) -> list[str]:
        """Display strings the wheel should be scrolled to for the current value."""
        return column_positions(self._value, self.settings)
