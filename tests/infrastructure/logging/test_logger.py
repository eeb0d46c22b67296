"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from src.infrastructure.logging import logger as logger_module


def test_logger_builder_writes_into_project_logs(tmp_path, monkeypatch):
    """LoggerBuilder should place log files under logs/<subdir>."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20251113"),
    )

    builder = (
        logger_module.LoggerBuilder()
        .name("history-test")
        .subdir("history")
        .prefix("history_logs")
        .console(False)
        .level(logging.DEBUG)
    )
    built = builder.build()

    assert built.name == "history-test"
    assert built.level == logging.DEBUG
    file_handlers = [
        handler
        for handler in built.handlers
        if isinstance(handler, logging.FileHandler)
    ]
    assert len(file_handlers) == 1
    assert file_handlers[0].baseFilename == str(
        tmp_path / "logs" / "history" / "20251113_history_logs.log"
    )
    assert not any(
        type(handler) is logging.StreamHandler for handler in built.handlers
    )
    # Building again reuses the configured logger.
    assert builder.build() is built
    assert len(built.handlers) == 1


def test_default_handlers_apply_formatter(tmp_path):
    """Default handler factories should attach the formatter."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "app.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert file_handler.formatter is fmt
    assert file_handler.level == logging.INFO
    assert isinstance(console_handler, logging.StreamHandler)
    assert console_handler.formatter is fmt
    file_handler.close()


def test_app_and_usage_loggers_are_singletons(monkeypatch):
    """get_app_logger and get_usage_logger return shared wrappers."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger

    app_logger.warning("careful")
    usage_logger.info("used")
    fake_logger.warning.assert_called_with("careful")
    fake_logger.info.assert_called_with("used")
