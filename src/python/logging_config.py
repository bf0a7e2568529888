"""
Logging setup for the picker engine and its developer tools.

The engine modules only log at DEBUG (clamping, column rebuilds, wheel
pushes); setup_logging() decides where those records go, based on the
'logging' section of config/config.json.
"""

import logging
import logging.handlers
from pathlib import Path
from config_manager import config


class ErrorRaisingHandler(logging.Handler):
    """Handler that raises an exception on ERROR or CRITICAL logs."""

    def emit(self, record):
        if record.levelno >= logging.ERROR:
            raise RuntimeError(f"Logger error: {record.getMessage()}")


def setup_logging(raise_on_error: bool = None, cfg=None):
    """
    Route picker logs to a rotating file and, optionally, the console.

    Args:
        raise_on_error: Add an ErrorRaisingHandler; defaults to the
            'raiseOnError' setting (off in the shipped config)
        cfg: ConfigManager to read from; defaults to the module singleton.
            Tests pass one pointing at a temporary log file.

    The file handler logs at 'level' (INFO by default, DEBUG shows every
    clamp and wheel push) to 'file', rotating at 'maxBytes'. The console
    handler only shows 'consoleLevel' and above so the CLI output stays
    readable.
    """
    cfg = cfg if cfg is not None else config

    log_level_str = cfg.get_logging_setting("level", "INFO")
    log_file = cfg.get_logging_setting("file", "logs/picker.log")
    max_bytes = cfg.get_logging_setting("maxBytes", 10485760)  # 10MB default
    backup_count = cfg.get_logging_setting("backupCount", 3)
    console_enabled = cfg.get_logging_setting("console", True)
    console_level_str = cfg.get_logging_setting("consoleLevel", "WARNING")

    if raise_on_error is None:
        raise_on_error = cfg.get_logging_setting("raiseOnError", False)

    # Convert log level string to logging constant
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)
    console_level = getattr(logging, console_level_str.upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if console_enabled:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(console_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    # Create log directory if it doesn't exist
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    # Add rotating file handler
    try:
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

        root_logger.info("Logging initialized - Level: %s, File: %s", log_level_str, log_file)

    except OSError as e:
        # If file handler fails, continue without file logging
        root_logger.warning("Could not initialize file logging: %s", e)

    # Add error-raising handler if requested (crashes on logger.error)
    if raise_on_error:
        root_logger.addHandler(ErrorRaisingHandler())


def get_logger(name):
    """
    Get a logger instance for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        logging.Logger: Configured logger instance
    """
    return logging.getLogger(name)
