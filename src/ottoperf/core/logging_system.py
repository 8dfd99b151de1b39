"""Logging system for the command line tool and its support code.

This module provides YAML-configurable logging with per-component levels,
platform-aware log locations, and startup-based rotation.

Platform-specific log locations:
    - macOS: ~/Library/Logs/OttoPerf/ottoperf.log
    - Linux: ~/.ottoperf/logs/ottoperf.log
    - Windows: %AppData%/OttoPerf/Logs/ottoperf.log

Each run rotates logs, keeping the last 5 runs.

Typical usage example:
    from ottoperf.core.logging_system import get_logger

    logger = get_logger(__name__)
    logger.info("Calculating takeoff for %.0f lbs", weight)
"""

import logging
import os
import platform
import time
from pathlib import Path
from typing import Any

import yaml

from ottoperf.core.config import merge_dicts

# Global configuration
_logging_config: dict[str, Any] = {}
_loggers_cache: dict[str, logging.Logger] = {}
_installed_handlers: list[logging.Handler] = []
_initialized = False


class LoggingError(Exception):
    """Raised when logging system operations fail."""


def get_platform_log_dir() -> Path:
    """Get platform-specific log directory.

    Returns:
        Path to the platform-appropriate log directory:
        - macOS: ~/Library/Logs/OttoPerf
        - Linux: ~/.ottoperf/logs
        - Windows: %AppData%/OttoPerf/Logs
    """
    system = platform.system()

    if system == "Darwin":  # macOS
        return Path.home() / "Library" / "Logs" / "OttoPerf"
    elif system == "Windows":
        appdata = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return appdata / "OttoPerf" / "Logs"
    else:  # Linux and other Unix-like systems
        return Path.home() / ".ottoperf" / "logs"


def rotate_logs(log_dir: Path, log_filename: str = "ottoperf.log", keep_count: int = 5) -> None:
    """Rotate logs on startup, keeping the last N runs.

    Renames current log to ottoperf.log.1, shifts older logs, and deletes
    logs beyond keep_count.

    Args:
        log_dir: Directory containing log files.
        log_filename: Base name of the log file (default: "ottoperf.log").
        keep_count: Number of old logs to keep (default: 5).
    """
    log_file = log_dir / log_filename

    if not log_file.exists():
        return

    oldest_log = log_dir / f"{log_filename}.{keep_count}"
    if oldest_log.exists():
        oldest_log.unlink()

    for i in range(keep_count - 1, 0, -1):
        old_log = log_dir / f"{log_filename}.{i}"
        new_log = log_dir / f"{log_filename}.{i + 1}"
        if old_log.exists():
            old_log.rename(new_log)

    log_file.rename(log_dir / f"{log_filename}.1")


def initialize_logging(
    config_path: str | Path | None = None,
    use_platform_dir: bool = True,
    console_level: str | None = None,
) -> None:
    """Initialize the logging system from YAML configuration.

    Call once at startup before any logging occurs. Rotates the log left by
    the previous run.

    Args:
        config_path: Path to logging configuration YAML file.
            If None, uses default configuration.
        use_platform_dir: If True, use platform-specific log directory.
            If False, use directory from config (for development/testing).
        console_level: Overrides the configured console level (e.g. "DEBUG").

    Raises:
        LoggingError: If the configuration cannot be loaded or names
            an unknown log level.

    Examples:
        >>> initialize_logging("config/logging.yaml", console_level="DEBUG")
    """
    global _logging_config, _initialized

    if config_path:
        try:
            config_path = Path(config_path)
            if not config_path.exists():
                raise LoggingError(f"Logging config file not found: {config_path}")

            with config_path.open("r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}

        except Exception as e:
            raise LoggingError(f"Failed to load logging config: {e}") from e

        _logging_config = merge_dicts(_get_default_config(), loaded)
    else:
        _logging_config = _get_default_config()

    if use_platform_dir:
        _logging_config["log_dir"] = str(get_platform_log_dir())

    if console_level:
        _logging_config["console"]["level"] = str(console_level).upper()

    _check_levels()

    _setup_directories()

    log_dir = Path(_logging_config["log_dir"])
    combined = _logging_config["combined_log"]
    rotate_logs(log_dir, combined["filename"], combined["backup_count"])

    _configure_root_logger()

    _loggers_cache.clear()
    _initialized = True


def _get_default_config() -> dict[str, Any]:
    """Get default logging configuration.

    Console output defaults to WARNING so the report on stdout stays clean.
    """
    return {
        "version": 1,
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "date_format": "%Y-%m-%d %H:%M:%S",
        "log_dir": "logs",
        "combined_log": {
            "enabled": True,
            "filename": "ottoperf.log",
            "backup_count": 5,
        },
        "console": {
            "enabled": True,
            "level": "WARNING",
        },
        "loggers": {},
    }


def _level_number(name: Any) -> int:
    """Translate a level name such as "INFO" to its numeric value.

    Raises:
        LoggingError: If the name is not a standard logging level.
    """
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        raise LoggingError(f"Unknown log level: {name}")
    return level


def _check_levels() -> None:
    """Reject unknown level names before any handler is installed."""
    _level_number(_logging_config["console"].get("level", "WARNING"))
    for name, logger_config in _logging_config.get("loggers", {}).items():
        if isinstance(logger_config, dict) and "level" in logger_config:
            try:
                _level_number(logger_config["level"])
            except LoggingError as e:
                raise LoggingError(f"Logger '{name}': {e}") from e


def _setup_directories() -> None:
    """Create log directories if they don't exist."""
    log_dir = Path(_logging_config.get("log_dir", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)


def _configure_root_logger() -> None:
    """Configure the root logger with handlers."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture all, filter in handlers

    _remove_installed_handlers()

    console_config = _logging_config.get("console", {})
    if console_config.get("enabled", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(_level_number(console_config.get("level", "WARNING")))
        console_handler.setFormatter(_get_formatter())
        _install(root_logger, console_handler)

    combined_config = _logging_config.get("combined_log", {})
    if combined_config.get("enabled", True):
        log_dir = Path(_logging_config.get("log_dir", "logs"))
        log_file = log_dir / combined_config.get("filename", "ottoperf.log")

        # Plain FileHandler: rotation happens once per run, not by size
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(_get_formatter())
        _install(root_logger, file_handler)


def _install(root_logger: logging.Logger, handler: logging.Handler) -> None:
    root_logger.addHandler(handler)
    _installed_handlers.append(handler)


def _remove_installed_handlers() -> None:
    """Detach and close the handlers added by a previous initialization."""
    root_logger = logging.getLogger()
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.flush()
        handler.close()


class MillisecondFormatter(logging.Formatter):
    """Formatter that appends milliseconds with a dot separator."""

    def formatTime(self, record, datefmt=None):
        ct = self.converter(record.created)
        s = time.strftime(datefmt or "%Y-%m-%d %H:%M:%S", ct)
        return f"{s}.{int(record.msecs):03d}"


def _get_formatter() -> logging.Formatter:
    fmt = _logging_config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    datefmt = _logging_config.get("date_format", "%Y-%m-%d %H:%M:%S")
    return MillisecondFormatter(fmt, datefmt)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a component.

    Loggers are cached and reused. Each logger can have its own level, or be
    disabled, under the 'loggers' section of the logging config YAML.

    Args:
        name: Logger name (typically the module's ``__name__``).

    Returns:
        Configured logger instance.

    Note:
        Use lazy formatting (%) instead of f-strings.
    """
    if not _initialized:
        initialize_logging()

    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = logging.getLogger(name)

    logger_config = _logging_config.get("loggers", {}).get(name, {})
    if logger_config.get("enabled", True):
        if "level" in logger_config:
            logger.setLevel(_level_number(logger_config["level"]))
    else:
        logger.disabled = True

    _loggers_cache[name] = logger
    return logger


def shutdown_logging() -> None:
    """Flush and close all handlers. Call at application shutdown.

    The next ``get_logger`` call initializes logging again with defaults.
    """
    global _initialized

    _remove_installed_handlers()
    _loggers_cache.clear()
    _initialized = False
