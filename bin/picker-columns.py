#!/usr/bin/env python3
"""
Picker Columns CLI - Show the wheel columns a picker would offer

This tool corrects a value against the given bounds and prints every
active column's legal range and values, to help debug bound narrowing.
"""

import os
import sys
import argparse
import datetime as dt

# Add src/python directory to Python path
script_dir = os.path.dirname(os.path.abspath(__file__))
src_dir = os.path.join(os.path.dirname(script_dir), 'src', 'python')
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

# Now we can import our modules
from config_manager import config
from enums import SelectorType
from logging_config import setup_logging
from picker_model import DateTimePickerModel
from picker_settings import PickerSettings


def parse_value(raw, selector_type):
    """Parse the --value argument for the given picker type"""
    if raw is None:
        return None
    if selector_type is SelectorType.TIME:
        return raw
    try:
        return dt.datetime.fromisoformat(raw)
    except ValueError:
        # Let the corrector fall back to the min date
        return raw


def build_settings(args):
    """Build PickerSettings from config.json plus command line overrides"""
    overrides = {}
    if args.type:
        overrides['selector_type'] = args.type
    if args.min:
        overrides['min_date'] = dt.datetime.fromisoformat(args.min)
    if args.max:
        overrides['max_date'] = dt.datetime.fromisoformat(args.max)
    for name in ('min_hour', 'max_hour', 'min_minute', 'max_minute'):
        if getattr(args, name) is not None:
            overrides[name] = getattr(args, name)
    return PickerSettings.from_config(config, **overrides)


def format_report(model):
    """Render the corrected value and its columns as text"""
    lines = [f"Type:  {model.settings.selector_type}",
             f"Value: {model.value}",
             ""]
    for field_range, column in zip(model.ranges, model.columns):
        lines.append(f"{field_range.field:<7} [{field_range.low}, {field_range.high}] "
                     f"({len(column.values)} values)")
        lines.append("        " + " ".join(column.display))
    lines.append("")
    lines.append("Positions: " + " ".join(model.positions))
    return "\n".join(lines)


def main():
    parser = argparse.ArgumentParser(description='Show the wheel columns of a bounded date/time picker')

    parser.add_argument('--type', '-t', choices=[t.value for t in SelectorType],
                        help='Picker type (defaults to config.json)')
    parser.add_argument('--value', '-v', help='Value: ISO date/time, or HH:MM for --type time')
    parser.add_argument('--min', help='Minimum date (ISO format)')
    parser.add_argument('--max', help='Maximum date (ISO format)')
    parser.add_argument('--min-hour', type=int, help='Minimum hour for --type time')
    parser.add_argument('--max-hour', type=int, help='Maximum hour for --type time')
    parser.add_argument('--min-minute', type=int, help='Minimum minute for --type time')
    parser.add_argument('--max-minute', type=int, help='Maximum minute for --type time')

    args = parser.parse_args()
    setup_logging()

    try:
        settings = build_settings(args)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    model = DateTimePickerModel(settings, parse_value(args.value, settings.selector_type))
    print(format_report(model))

    return 0

if __name__ == "__main__":
    sys.exit(main())
