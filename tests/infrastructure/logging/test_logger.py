"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from src.infrastructure.logging import logger as logger_module


def test_logger_builder_writes_to_dated_file(tmp_path, monkeypatch):
    """LoggerBuilder should build loggers in the project logs directory."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240301"),
    )

    builder = logger_module.LoggerBuilder()
    built = (
        builder.name("ledger_test")
        .subdir("prices")
        .prefix("price_refresh")
        .console(False)
        .level(logging.WARNING)
        .build()
    )

    assert built.name == "ledger_test"
    assert built.level == logging.WARNING
    assert built.propagate is False
    assert len(built.handlers) == 1
    expected_path = tmp_path / "logs" / "prices" / "20240301_price_refresh.log"
    assert built.handlers[0].baseFilename == str(expected_path)
    # Building again should reuse the configured logger.
    assert builder.build() is built
    assert len(built.handlers) == 1

    for handler in list(built.handlers):
        handler.close()
        built.removeHandler(handler)


def test_builder_uses_custom_handler_factories(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    file_factory = MagicMock(return_value=logging.NullHandler())
    console_factory = MagicMock(return_value=logging.NullHandler())

    built = (
        logger_module.LoggerBuilder()
        .name("ledger_custom_handlers")
        .file_handler(file_factory)
        .console_handler(console_factory)
        .build()
    )

    file_factory.assert_called_once()
    console_factory.assert_called_once()
    assert len(built.handlers) == 2
    built.handlers.clear()


def test_default_handlers_use_formatter(tmp_path):
    """Default handlers should apply the provided formatter."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "ledger.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert isinstance(file_handler, logging.FileHandler)
    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    assert isinstance(console_handler, logging.StreamHandler)
    assert console_handler.formatter is fmt
    file_handler.close()


def test_logger_singleton_delegates_to_underlying_logger(monkeypatch):
    """Logger methods should call the wrapped logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    wrapped = logger_module.Logger("ledger")
    wrapped.info("hello")
    wrapped.warning("warn")
    wrapped.error("err")
    wrapped.debug("dbg")
    wrapped.critical("crit")
    wrapped.exception("boom")

    fake_logger.info.assert_called_with("hello")
    fake_logger.warning.assert_called_with("warn")
    fake_logger.error.assert_called_with("err")
    fake_logger.debug.assert_called_with("dbg")
    fake_logger.critical.assert_called_with("crit")
    fake_logger.exception.assert_called_with("boom")
    assert logger_module.Logger("ledger") is wrapped


def test_app_and_usage_loggers_are_separate_singletons(monkeypatch):
    """get_app_logger and get_usage_logger should return singletons."""
    subdirs = []

    def _fake_build(self):
        subdirs.append(self._subdir)
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert subdirs == ["app", "usage"]
