"""
Tests for value correction: every input ends up inside the bounds.
"""
import datetime as dt

import pytest

from picker_settings import PickerSettings
from value_corrector import correct_value


class TestTimeCorrection:
    """Time values are clamped field by field."""

    @pytest.mark.parametrize("raw,expected", [
        ("25:99", "18:59"),
        ("12:30", "12:30"),
        ("7:5", "09:05"),
        ("12", "12:00"),
        ("ab:cd", "09:00"),
        ("", "09:00"),
        (None, "09:00"),
        (dt.time(10, 7), "10:07"),
    ])
    def test_office_hours(self, time_settings, raw, expected):
        assert correct_value(raw, time_settings) == expected

    def test_minute_clamps_to_max_minute(self, time_settings):
        settings = time_settings.with_changes(max_minute=30)
        assert correct_value("25:99", settings) == "18:30"

    def test_default_respects_min_minute(self, time_settings):
        settings = time_settings.with_changes(min_minute=15)
        assert correct_value(None, settings) == "09:15"


class TestDateCorrection:
    """Calendar values are clamped by absolute time."""

    @pytest.mark.parametrize("raw", [None, "", "2021-01-01", 42, [2021, 1, 1]])
    def test_non_dates_fall_back_to_min(self, datetime_settings, min_date, raw):
        assert correct_value(raw, datetime_settings) == min_date

    def test_before_min(self, datetime_settings, min_date):
        assert correct_value(dt.datetime(2019, 6, 1), datetime_settings) == min_date

    def test_same_day_before_min_time(self, datetime_settings, min_date):
        assert correct_value(dt.datetime(2020, 1, 15, 8, 29), datetime_settings) == min_date

    def test_after_max(self, datetime_settings, max_date):
        assert correct_value(dt.datetime(2031, 1, 1), datetime_settings) == max_date

    def test_inside_bounds_unchanged(self, datetime_settings):
        value = dt.datetime(2025, 6, 1, 12, 0)
        assert correct_value(value, datetime_settings) == value

    def test_date_promoted_to_midnight(self, datetime_settings, min_date):
        assert correct_value(dt.date(2025, 6, 1), datetime_settings) == dt.datetime(2025, 6, 1)
        # Midnight of the min day is still before 08:30
        assert correct_value(dt.date(2020, 1, 15), datetime_settings) == min_date


RAW_INPUTS = [
    None, "", "00:00", "25:99", "-1:-1", "x", "9", "10:61",
    dt.datetime(1999, 1, 1), dt.datetime(2020, 1, 15, 8, 30), dt.datetime(2024, 2, 29, 23, 59),
    dt.datetime(2030, 12, 31), dt.datetime(2030, 12, 31, 0, 1), dt.datetime(2100, 1, 1),
    dt.date(2022, 7, 4), 0, 3.5,
]

SETTINGS = [
    PickerSettings(selector_type="time", min_hour=9, max_hour=18),
    PickerSettings(selector_type="time", min_hour=0, max_hour=23, min_minute=15, max_minute=45),
    PickerSettings(selector_type="date", min_date=dt.datetime(2020, 1, 15, 8, 30),
                   max_date=dt.datetime(2030, 12, 31)),
    PickerSettings(selector_type="year-month", min_date=dt.datetime(2024, 2, 29),
                   max_date=dt.datetime(2024, 3, 1)),
    PickerSettings(selector_type="datetime", min_date=dt.datetime(2020, 1, 1),
                   max_date=dt.datetime(2020, 1, 1, 0, 0)),
]


def _within_bounds(value, settings):
    if settings.is_time:
        hour, minute = (int(part) for part in value.split(":"))
        return (settings.min_hour <= hour <= settings.max_hour
                and settings.min_minute <= minute <= settings.max_minute)
    return settings.min_date <= value <= settings.max_date


@pytest.mark.parametrize("settings", SETTINGS)
@pytest.mark.parametrize("raw", RAW_INPUTS)
def test_result_within_bounds_and_idempotent(settings, raw):
    corrected = correct_value(raw, settings)
    assert _within_bounds(corrected, settings)
    assert correct_value(corrected, settings) == corrected
