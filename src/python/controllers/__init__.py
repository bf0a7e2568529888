"""Controllers package for the date/time picker.

This package wires the pure picker model to a wheel widget through Qt signals.

Main Components:
    DateTimePickerController: Adopts values, refreshes wheel columns and
        pushes corrected positions back to the wheel

Usage:
    from controllers import DateTimePickerController

    controller = DateTimePickerController(wheel, PickerSettings(selector_type="date"))
    controller.value_changed.connect(on_value)
    wheel.selection_changed.connect(controller.on_picker_change)
"""

from controllers.picker_controller import DateTimePickerController

__all__ = ['DateTimePickerController']
