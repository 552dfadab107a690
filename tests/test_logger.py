"""Tests for the logging setup."""

import logging

import pytest

from config import ConfigurationManager
from weighslip.utils.logger import (
    LevelColorFormatter,
    LoggingSettings,
    get_logger,
    set_level,
    setup_logger,
    setup_logger_from_config,
)


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    setup_logger(LoggingSettings(colorize=False))


def test_get_logger_nests_under_package():
    assert get_logger("main").name == "weighslip.main"
    assert get_logger("weighslip.pipeline").name == "weighslip.pipeline"
    assert get_logger("weighslipper").name == "weighslip.weighslipper"


def test_setup_replaces_handlers():
    setup_logger()
    app_logger = setup_logger(LoggingSettings(colorize=False))
    assert len(app_logger.handlers) == 1
    assert not isinstance(app_logger.handlers[0].formatter, LevelColorFormatter)


def test_file_handler_writes_log(tmp_path):
    log_file = tmp_path / "logs" / "weighslip.log"
    setup_logger(LoggingSettings(level="DEBUG", log_file=str(log_file)))
    get_logger("tests").warning("tare weight missing")

    for handler in logging.getLogger("weighslip").handlers:
        handler.flush()
    assert "tare weight missing" in log_file.read_text(encoding="utf-8")


def test_set_level_updates_handlers():
    app_logger = setup_logger()
    set_level("warning")
    assert app_logger.level == logging.WARNING
    assert all(h.level == logging.WARNING for h in app_logger.handlers)


def test_set_level_rejects_unknown_name():
    with pytest.raises(ValueError):
        set_level("chatty")


def test_settings_from_config(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text(
        "logging:\n"
        "  level: DEBUG\n"
        "  console:\n"
        "    colorize: false\n"
        "  file:\n"
        "    enabled: true\n"
        f"    path: {(tmp_path / 'run.log').as_posix()}\n",
        encoding="utf-8",
    )
    ConfigurationManager(str(path))

    settings = LoggingSettings.from_config()
    assert settings.level == "DEBUG"
    assert settings.colorize is False
    assert settings.log_file.endswith("run.log")
    assert settings.log_format == LoggingSettings.log_format

    app_logger = setup_logger_from_config()
    assert len(app_logger.handlers) == 2


def test_color_formatter_wraps_line():
    formatter = LevelColorFormatter("%(message)s")
    record = logging.LogRecord("weighslip", logging.ERROR, __file__, 1, "boom", None, None)
    line = formatter.format(record)
    assert line.startswith("\x1b[") and "boom" in line
