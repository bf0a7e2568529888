"""
PickerSettings: the bound and formatting configuration of one picker.

Settings are frozen and hashable so that derived columns can be memoized on
(settings, value).
"""

import datetime as dt
import logging
from dataclasses import dataclass, field, replace
from typing import Any

from custom_types import FilterCallback, FormatterCallback
from enums import BoundaryDirection, SelectorType

logger = logging.getLogger(__name__)

DEFAULT_YEAR_SPAN = 10


def identity_formatter(field_name: str, value: str) -> str:
    """Default formatter: show the origin value unchanged."""
    return value


def default_min_date(year_span: int = DEFAULT_YEAR_SPAN) -> dt.datetime:
    """January 1st, `year_span` years before the current year."""
    return dt.datetime(dt.date.today().year - year_span, 1, 1)


def default_max_date(year_span: int = DEFAULT_YEAR_SPAN) -> dt.datetime:
    """December 31st (00:00), `year_span` years after the current year."""
    return dt.datetime(dt.date.today().year + year_span, 12, 31)


@dataclass(frozen=True)
class PickerSettings:
    """Selector type, bounds and column callbacks of a picker.

    Callers must keep min_date <= max_date, min_hour <= max_hour and
    min_minute <= max_minute; these are not checked.
    """
    selector_type: SelectorType = SelectorType.DATETIME
    min_date: dt.datetime = field(default_factory=default_min_date)
    max_date: dt.datetime = field(default_factory=default_max_date)
    min_hour: int = 0
    max_hour: int = 23
    min_minute: int = 0
    max_minute: int = 59
    filter: FilterCallback | None = None
    formatter: FormatterCallback = identity_formatter

    def __post_init__(self) -> None:
        # Accept plain strings such as "year-month"; unknown types raise ValueError
        object.__setattr__(self, "selector_type", SelectorType(self.selector_type))

    def _key(self) -> tuple:
        # Callbacks compare by identity; they may be unhashable callable objects
        return (self.selector_type, self.min_date, self.max_date,
                self.min_hour, self.max_hour, self.min_minute, self.max_minute,
                id(self.filter), id(self.formatter))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PickerSettings):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    @property
    def is_time(self) -> bool:
        return self.selector_type is SelectorType.TIME

    def bound(self, direction: BoundaryDirection) -> dt.datetime:
        """Return min_date or max_date for the given direction."""
        if direction is BoundaryDirection.MAX:
            return self.max_date
        return self.min_date

    def with_changes(self, **changes: Any) -> "PickerSettings":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    @classmethod
    def from_config(cls, cfg: Any, **overrides: Any) -> "PickerSettings":
        """Build settings from the 'picker' section of a ConfigManager.

        Args:
            cfg: ConfigManager (or anything with get_picker_setting)
            **overrides: Field values that take precedence over the config,
                typically filter and formatter callables

        Returns:
            PickerSettings populated from configuration
        """
        year_span = cfg.get_picker_setting("yearSpan", DEFAULT_YEAR_SPAN)
        min_date = cfg.get_picker_setting("minDate")
        max_date = cfg.get_picker_setting("maxDate")

        values: dict[str, Any] = {
            "selector_type": cfg.get_picker_setting("type", SelectorType.DATETIME.value),
            "min_date": dt.datetime.fromisoformat(min_date) if min_date else default_min_date(year_span),
            "max_date": dt.datetime.fromisoformat(max_date) if max_date else default_max_date(year_span),
            "min_hour": cfg.get_picker_setting("minHour", 0),
            "max_hour": cfg.get_picker_setting("maxHour", 23),
            "min_minute": cfg.get_picker_setting("minMinute", 0),
            "max_minute": cfg.get_picker_setting("maxMinute", 59),
        }
        values.update(overrides)

        logger.debug("Picker settings from config: type=%s, dates=[%s, %s]",
                     values["selector_type"], values["min_date"], values["max_date"])
        return cls(**values)
