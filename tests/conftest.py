"""
conftest.py - Shared pytest fixtures for the date/time picker tests

This module provides standardized test fixtures for use across all picker tests.
It includes fixtures for:
- Path setup and Python path configuration
- Configuration management
- Picker settings with observable bounds
- A fake wheel widget standing in for the scroll-wheel picker
"""
import datetime as dt
import json
import os
import pathlib
import sys

import pytest

# Headless Qt for the controller tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add the src/python directory to the Python path
sys.path.insert(0, str(pathlib.Path(__file__).parent.parent / "src" / "python"))

# Imports from picker modules (now that path is configured)
from config_manager import ConfigManager
from picker_settings import PickerSettings


# Fake Wheel Widget
# -----------------

class FakeWheelPicker:
    """In-memory wheel: tracks columns, selected indexes and pushes."""

    def __init__(self):
        self.columns = []
        self.indexes = []
        self.column_updates = 0
        self.position_pushes = []

    def set_columns(self, columns):
        previous = self.indexes
        self.columns = [list(column) for column in columns]
        self.indexes = [
            previous[i] if i < len(previous) and previous[i] < len(column) else 0
            for i, column in enumerate(self.columns)
        ]
        self.column_updates += 1

    def get_selected_indexes(self):
        return list(self.indexes)

    def get_selected_values(self):
        return [column[index] for column, index in zip(self.columns, self.indexes)]

    def set_column_positions(self, values):
        self.position_pushes.append(list(values))
        for i, value in enumerate(values):
            if i < len(self.columns) and value in self.columns[i]:
                self.indexes[i] = self.columns[i].index(value)

    def select(self, column, value):
        """Simulate the user scrolling `column` to the entry `value`."""
        self.indexes[column] = self.columns[column].index(value)


@pytest.fixture
def wheel():
    """Provide a fresh fake wheel widget."""
    return FakeWheelPicker()


# Settings Fixtures
# -----------------

@pytest.fixture
def min_date():
    return dt.datetime(2020, 1, 15, 8, 30)


@pytest.fixture
def max_date():
    return dt.datetime(2030, 12, 31)


@pytest.fixture
def datetime_settings(min_date, max_date):
    """Datetime picker whose min bound narrows day, hour and minute."""
    return PickerSettings(selector_type="datetime", min_date=min_date, max_date=max_date)


@pytest.fixture
def date_settings():
    """Date picker over whole years, for month/day clamping."""
    return PickerSettings(
        selector_type="date",
        min_date=dt.datetime(2020, 1, 1),
        max_date=dt.datetime(2030, 12, 31)
    )


@pytest.fixture
def time_settings():
    """Time picker restricted to office hours."""
    return PickerSettings(selector_type="time", min_hour=9, max_hour=18)


# Configuration Fixtures
# ---------------------

@pytest.fixture
def test_config_data(tmp_path):
    """Create minimal test configuration data."""
    return {
        "picker": {
            "type": "date",
            "minDate": "2020-01-15T08:30:00",
            "maxDate": "2030-12-31T00:00:00",
            "minHour": 6,
            "maxHour": 20,
            "minMinute": 0,
            "maxMinute": 45
        },
        "logging": {
            "level": "DEBUG",
            "file": str(tmp_path / "logs" / "picker.log"),
            "maxBytes": 1024,
            "backupCount": 1,
            "console": False,
            "raiseOnError": False
        }
    }


@pytest.fixture
def test_config_file(tmp_path, test_config_data):
    """Write the test configuration to a temporary file."""
    config_file = tmp_path / "test_config.json"
    with open(config_file, 'w') as f:
        json.dump(test_config_data, f)
    return config_file


@pytest.fixture
def test_config_manager(test_config_file):
    """Create a ConfigManager instance with test configuration."""
    return ConfigManager(cfg_path=test_config_file, exit_on_error=False)
