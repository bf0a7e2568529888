"""
Range set and column derivation for the picker wheels.

build_ranges() turns a corrected value into the legal numeric range of every
active column; materialize_columns() expands those ranges into the strings the
wheel shows. Each Column keeps two parallel tuples: the origin values
(filtered, unformatted) used to map a selected index back to a number, and the
display values produced by the formatter.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache

from boundary_resolver import resolve_boundary
from custom_types import FilterCallback, FormatterCallback, PickerValue
from date_utils import pad_zero, times
from enums import BoundaryDirection, ColumnField, SelectorType
from picker_settings import PickerSettings, identity_formatter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldRange:
    """Inclusive numeric range of one column."""
    field: ColumnField
    low: int
    high: int


@dataclass(frozen=True)
class Column:
    """One wheel column: origin values and their display strings, index-aligned."""
    field: ColumnField
    values: tuple[str, ...]
    display: tuple[str, ...]


def build_ranges(settings: PickerSettings, value: PickerValue) -> list[FieldRange]:
    """Compute the ordered ranges of the columns active for `settings`.

    Args:
        settings: Picker settings (type and bounds)
        value: Corrected picker value

    Returns:
        list of FieldRange, one per visible column, in wheel order
    """
    if settings.is_time:
        return [
            FieldRange(ColumnField.HOUR, settings.min_hour, settings.max_hour),
            FieldRange(ColumnField.MINUTE, settings.min_minute, settings.max_minute),
        ]

    upper = resolve_boundary(BoundaryDirection.MAX, value, settings.max_date)
    lower = resolve_boundary(BoundaryDirection.MIN, value, settings.min_date)

    result = [
        FieldRange(ColumnField.YEAR, lower.year, upper.year),
        FieldRange(ColumnField.MONTH, lower.month, upper.month),
        FieldRange(ColumnField.DAY, lower.day, upper.day),
        FieldRange(ColumnField.HOUR, lower.hour, upper.hour),
        FieldRange(ColumnField.MINUTE, lower.minute, upper.minute),
    ]

    if settings.selector_type is SelectorType.DATE:
        del result[3:]
    elif settings.selector_type is SelectorType.YEAR_MONTH:
        del result[2:]
    return result


def materialize_columns(ranges: list[FieldRange],
                        filter: FilterCallback | None = None,
                        formatter: FormatterCallback = identity_formatter) -> list[Column]:
    """Expand ranges into columns of origin and display values.

    Args:
        ranges: Column ranges from build_ranges()
        filter: Optional (field, values) -> values hook; may reorder, drop or
            replace entries
        formatter: (field, value) -> display string, applied per entry

    Returns:
        list of Column in the same order as `ranges`
    """
    columns = []
    for field_range in ranges:
        values = times(field_range.high - field_range.low + 1,
                       lambda index, low=field_range.low: pad_zero(low + index))

        if filter is not None:
            values = filter(field_range.field.value, values)

        display = [formatter(field_range.field.value, value) for value in values]
        columns.append(Column(field_range.field, tuple(values), tuple(display)))
    return columns


@lru_cache(maxsize=64)
def compute_columns(settings: PickerSettings, value: PickerValue) -> tuple[Column, ...]:
    """Memoized build_ranges() + materialize_columns() for (settings, value)."""
    ranges = build_ranges(settings, value)
    logger.debug("Ranges for %s: %s", value,
                 ", ".join(f"{r.field}=[{r.low}, {r.high}]" for r in ranges))
    return tuple(materialize_columns(ranges, settings.filter, settings.formatter))
