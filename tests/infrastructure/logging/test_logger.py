"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from src.infrastructure.logging import logger as logger_module


def test_logger_builder_writes_to_dated_file(tmp_path, monkeypatch):
    """LoggerBuilder should place the log file under logs/<subdir>."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20250131"),
    )

    builder = (
        logger_module.LoggerBuilder()
        .name("ledger_engine.test_builder")
        .subdir("reports")
        .prefix("report_logs")
        .console(False)
        .level(logging.DEBUG)
    )
    built = builder.build()

    assert built.level == logging.DEBUG
    assert built.propagate is False
    assert len(built.handlers) == 1
    expected = tmp_path / "logs" / "reports" / "20250131_report_logs.log"
    assert built.handlers[0].baseFilename == str(expected)
    assert builder.build() is built


def test_default_handlers_apply_formatter(tmp_path):
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "ledger.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert file_handler.formatter is fmt
    assert console_handler.formatter is fmt
    assert file_handler.level == logging.INFO


def test_env_level_reads_log_level(monkeypatch):
    """LOG_LEVEL should drive the default level; unknown values mean INFO."""
    monkeypatch.setenv("LOG_LEVEL", "warning")
    assert logger_module._env_level() == logging.WARNING

    monkeypatch.setenv("LOG_LEVEL", "chatty")
    assert logger_module._env_level() == logging.INFO

    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert logger_module._env_level() == logging.INFO


def test_logger_wrapper_delegates_calls(monkeypatch):
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    wrapper = logger_module.Logger("ledger_engine")
    wrapper.info("aggregated")
    wrapper.warning("no restrictions")
    wrapper.error("store unavailable")

    fake_logger.info.assert_called_once_with("aggregated")
    fake_logger.warning.assert_called_once_with("no restrictions")
    fake_logger.error.assert_called_once_with("store unavailable")
    assert logger_module.Logger("other") is wrapper


def test_app_and_usage_loggers_are_separate_singletons(monkeypatch):
    """App and usage loggers should be built with their own subdirs."""
    built = []

    def _fake_build(self):
        built.append((self._name, self._subdir, self._prefix))
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert built == [
        ("ledger_engine", "app", "app_logs"),
        ("ledger_engine.usage", "usage", "usage_logs"),
    ]
