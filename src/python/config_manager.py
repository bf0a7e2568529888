import json
import pathlib
import sys
import logging
from typing import Any

from custom_types import LoggingConfig, PickerConfig

logger = logging.getLogger(__name__)

class ConfigManager:
    """Manages application configuration: picker bounds and logging"""

    picker: PickerConfig
    log_settings: LoggingConfig
    exit_on_error: bool
    _cfg: dict[str, Any]
    cfg_path: str | pathlib.Path

    def __init__(
        self,
        cfg_path: str | pathlib.Path | None = None,
        exit_on_error: bool = True
    ) -> None:
        """Initialize the ConfigManager with an optional custom path.

        Args:
            cfg_path: Path to the config.json file (defaults to standard location if None)
            exit_on_error: Whether to exit the program on configuration errors
        """
        self.picker = {}
        self.log_settings = {}
        self.exit_on_error = exit_on_error
        self._cfg = {}

        self.cfg_path = cfg_path if cfg_path is not None else self._default_config_path()

        # Load configuration
        self.load_config()

    def _default_config_path(self) -> pathlib.Path:
        """Get the default path to the config.json file."""
        base = pathlib.Path(__file__).parent.parent.parent
        return base / "config" / "config.json"

    def load_config(self) -> None:
        """Load master configuration from the configured path."""
        try:
            with open(self.cfg_path, 'r') as f:
                self._cfg = json.load(f)
        except Exception as e:
            error_msg = "Critical error loading configuration '%s': %s"
            logger.error(error_msg, self.cfg_path, e)
            if self.exit_on_error:
                sys.exit(1)
            else:
                raise RuntimeError(f"Critical error loading configuration '{self.cfg_path}': {e}")

        # Validate and assign sections
        try:
            self.picker = self._cfg["picker"]
        except KeyError as e:
            error_msg = "Configuration missing key: %s"
            logger.error(error_msg, e)
            if self.exit_on_error:
                sys.exit(1)
            else:
                raise KeyError(f"Configuration missing key: {e}")

        self.log_settings = self._cfg.get("logging", {})
        logger.debug("Loaded configuration from %s", self.cfg_path)

    def get_setting(self, section: str, key: str, default: Any = None) -> Any:
        """Get a generic setting from the master config"""
        try:
            return self._cfg.get(section, {}).get(key, default)
        except Exception:
            return default

    def set_setting(self, section: str, key: str, value: Any) -> None:
        """Set a setting in memory (does not persist to file).

        Args:
            section: Configuration section (e.g., 'picker', 'logging')
            key: Setting key within the section
            value: Value to set
        """
        if section not in self._cfg:
            self._cfg[section] = {}
        self._cfg[section][key] = value

    def get_picker_setting(self, key: str, default: Any = None) -> Any:
        """Get a picker configuration setting (type, bounds, yearSpan)"""
        return self.get_setting("picker", key, default)

    def get_logging_setting(self, key: str, default: Any = None) -> Any:
        """Get a logging configuration setting"""
        return self.get_setting("logging", key, default)


# Create a singleton instance
config = ConfigManager()
