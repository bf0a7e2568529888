"""Picker controller: keeps a wheel widget and a DateTimePickerModel in sync."""

from typing import Any
from PyQt6.QtCore import QObject, QTimer, pyqtSignal
from custom_types import PickerValue, WheelPickerProtocol
from picker_model import DateTimePickerModel
from picker_settings import PickerSettings
import logging

logger = logging.getLogger(__name__)


class DateTimePickerController(QObject):
    """Handles value adoption, column refreshes and wheel position pushes.

    Data flows one way on read (value -> columns -> wheel) and one way on
    write (wheel indexes -> corrected value). Pushing positions back to the
    wheel is deferred to the next event-loop turn so the wheel has rebuilt
    its columns first; a newer push always supersedes a pending one.

    Signals:
        value_changed: Emitted when the adopted value changes (value)
        confirmed: Emitted when the user confirms (value)
        cancelled: Emitted when the user cancels
        changed: Emitted after a user selection was applied and pushed back
    """

    # Signals
    value_changed = pyqtSignal(object)  # value
    confirmed = pyqtSignal(object)  # value
    cancelled = pyqtSignal()
    changed = pyqtSignal()

    def __init__(
        self,
        picker: WheelPickerProtocol,
        settings: PickerSettings | None = None,
        value: Any = None
    ) -> None:
        """Initialize the picker controller.

        Args:
            picker: The wheel widget rendering the columns
            settings: Picker settings (type, bounds, filter, formatter)
            value: Initial value, corrected into the bounds
        """
        super().__init__()
        self.picker = picker
        self.model = DateTimePickerModel(settings, value)

        self._columns: list[list[str]] | None = None
        self._sync_generation: int = 0
        self._pending_sync: int | None = None
        self._change_generation: int | None = None

        self._refresh_columns()
        self._schedule_sync()

        logger.debug("DateTimePickerController initialized with value: %s", self.model.value)

    @property
    def value(self) -> PickerValue:
        return self.model.value

    def set_value(self, value: Any) -> None:
        """Set the value from outside (e.g. a bound property).

        The value is corrected first; nothing happens if the corrected value
        equals the current one.

        Args:
            value: New value, "HH:MM" for type=time or a datetime/date otherwise
        """
        if self.model.set_value(value):
            self._on_value_adopted()

    def update_settings(self, **changes: Any) -> None:
        """Change type, bounds, filter or formatter and resynchronize the wheel.

        Args:
            **changes: PickerSettings fields to replace
        """
        if self.model.update_settings(**changes):
            self.value_changed.emit(self.model.value)
        self._refresh_columns()
        self._schedule_sync()

    def on_picker_change(self) -> None:
        """Handle a "selection changed" event from the wheel."""
        indexes = self.picker.get_selected_indexes()
        logger.debug("Wheel selection changed: indexes=%s, values=%s",
                     indexes, self.picker.get_selected_values())

        if self.model.select(indexes):
            self.value_changed.emit(self.model.value)
            self._refresh_columns()

        # Push back even when unchanged so the wheel never rests on a
        # position the corrector rejected
        self._schedule_sync()
        self._change_generation = self._sync_generation

    def confirm(self) -> None:
        """Emit the confirmed value."""
        logger.debug("Picker confirmed: %s", self.model.value)
        self.confirmed.emit(self.model.value)

    def cancel(self) -> None:
        """Emit cancellation."""
        logger.debug("Picker cancelled")
        self.cancelled.emit()

    def flush_pending_sync(self) -> None:
        """Push the pending positions now instead of waiting for the event loop."""
        if self._pending_sync is not None:
            self._flush_sync(self._pending_sync)

    def _on_value_adopted(self) -> None:
        self.value_changed.emit(self.model.value)
        self._refresh_columns()
        self._schedule_sync()

    def _refresh_columns(self) -> None:
        columns = self.model.display_columns
        if columns != self._columns:
            logger.debug("Columns changed, updating wheel (%d columns)", len(columns))
            self._columns = columns
            self.picker.set_columns(columns)

    def _schedule_sync(self) -> None:
        self._sync_generation += 1
        generation = self._sync_generation
        self._pending_sync = generation
        QTimer.singleShot(0, lambda: self._flush_sync(generation))

    def _flush_sync(self, generation: int) -> None:
        # Superseded by a later mutation, or already flushed
        if generation != self._pending_sync:
            return
        self._pending_sync = None

        positions = self.model.positions
        logger.debug("Pushing wheel positions: %s", positions)
        self.picker.set_column_positions(positions)

        # Only the push scheduled by the user selection reports the change
        if generation == self._change_generation:
            self._change_generation = None
            self.changed.emit()
