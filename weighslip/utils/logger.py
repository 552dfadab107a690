"""
Logging for the weighing slip parser.

Every module logs through a child of the "weighslip" logger, so a single
setup call decides where parser diagnostics go: a coloured console
stream, and optionally a rotating log file kept next to the batch output.

Usage:
    from weighslip.utils.logger import get_logger, setup_logger_from_config

    setup_logger_from_config()          # once, in main.py
    logger = get_logger(__name__)       # in every module
    logger.warning("Tare weight not found in slip_07.json")
"""

import logging
import logging.handlers
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import colorama
from colorama import Fore, Style

colorama.init()

ROOT_LOGGER_NAME = "weighslip"

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class LoggingSettings:
    """
    Where and how parser diagnostics are written.

    Attributes:
        level: Level name for the logger and every handler
        log_format: Record format shared by console and file
        date_format: Timestamp format
        colorize: Colour console lines by level
        log_file: Rotating log file path, or None for console only
        max_bytes: File size that triggers rotation
        backup_count: Rotated files kept
    """
    level: str = "INFO"
    log_format: str = DEFAULT_FORMAT
    date_format: str = DEFAULT_DATE_FORMAT
    colorize: bool = True
    log_file: Optional[str] = None
    max_bytes: int = 10 * 1024 * 1024
    backup_count: int = 5

    @classmethod
    def from_config(cls) -> 'LoggingSettings':
        """Bind the "logging" section of the YAML configuration."""
        from config import get_config

        log_file = None
        if get_config("logging.file.enabled", False):
            log_file = get_config("logging.file.path")

        return cls(
            level=get_config("logging.level") or cls.level,
            log_format=get_config("logging.format") or cls.log_format,
            date_format=get_config("logging.date_format") or cls.date_format,
            colorize=bool(get_config("logging.console.colorize", cls.colorize)),
            log_file=log_file,
            max_bytes=get_config("logging.file.max_bytes") or cls.max_bytes,
            backup_count=get_config("logging.file.backup_count") or cls.backup_count,
        )


class LevelColorFormatter(logging.Formatter):
    """Wraps each console line in the colour of its level."""

    LEVEL_COLORS = {
        logging.DEBUG: Fore.CYAN,
        logging.INFO: Fore.GREEN,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Fore.RED + Style.BRIGHT,
    }

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        color = self.LEVEL_COLORS.get(record.levelno)
        if not color:
            return line
        return f"{color}{line}{Style.RESET_ALL}"


def _console_handler(settings: LoggingSettings) -> logging.Handler:
    # stderr, so JSON written to stdout by callers stays clean
    handler = logging.StreamHandler(sys.stderr)
    formatter_class = LevelColorFormatter if settings.colorize else logging.Formatter
    handler.setFormatter(formatter_class(settings.log_format, datefmt=settings.date_format))
    return handler


def _file_handler(settings: LoggingSettings) -> logging.Handler:
    path = Path(settings.log_file)
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=settings.max_bytes,
        backupCount=settings.backup_count,
        encoding='utf-8'
    )
    handler.setFormatter(logging.Formatter(settings.log_format, datefmt=settings.date_format))
    return handler


def setup_logger(settings: Optional[LoggingSettings] = None) -> logging.Logger:
    """
    Configure the "weighslip" logger.

    Calling it again replaces the previous handlers, so a batch run can
    re-initialize logging after switching configuration files.

    Args:
        settings: Logging settings. Defaults to LoggingSettings().

    Returns:
        The configured "weighslip" logger.

    Example:
        >>> setup_logger(LoggingSettings(level="DEBUG", log_file="logs/weighslip.log"))
    """
    settings = settings or LoggingSettings()

    app_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()

    app_logger.addHandler(_console_handler(settings))
    if settings.log_file:
        app_logger.addHandler(_file_handler(settings))

    app_logger.propagate = False
    set_level(settings.level)

    app_logger.debug(f"Logging initialized at {settings.level.upper()}")
    return app_logger


def setup_logger_from_config() -> logging.Logger:
    """Configure logging from the loaded YAML configuration."""
    return setup_logger(LoggingSettings.from_config())


def set_level(level: Union[str, int]) -> None:
    """
    Change the level of the "weighslip" logger and all of its handlers.

    Args:
        level: Level name ("DEBUG", "warning", ...) or logging constant.

    Raises:
        ValueError: If the level name is unknown.
    """
    if isinstance(level, str):
        numeric = logging.getLevelName(level.upper())
        if not isinstance(numeric, int):
            raise ValueError(f"Unknown logging level: {level}")
        level = numeric

    app_logger = logging.getLogger(ROOT_LOGGER_NAME)
    app_logger.setLevel(level)
    for handler in app_logger.handlers:
        handler.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module, nested under "weighslip"."""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
