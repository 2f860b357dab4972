"""Tests for the application logger utility."""

from __future__ import annotations

import logging
import logging.handlers

from pomodo_cli.utils.logger import get_logger


def test_get_logger_creates_log_file(isolated_dirs):
    logger = get_logger()
    assert (isolated_dirs / "logs" / "pomodo.log").exists()
    assert isinstance(logger, logging.Logger)


def test_get_logger_returns_singleton():
    assert get_logger() is get_logger()


def test_get_logger_writes_message(isolated_dirs):
    get_logger().info("hello from test")
    for handler in get_logger().handlers:
        handler.flush()
    assert "hello from test" in (isolated_dirs / "logs" / "pomodo.log").read_text()


def test_module_loggers_reach_the_file(isolated_dirs):
    get_logger()
    logging.getLogger("pomodo_cli.pomodoro").debug("child message")
    for handler in get_logger().handlers:
        handler.flush()
    assert "child message" in (isolated_dirs / "logs" / "pomodo.log").read_text()


def test_does_not_propagate():
    assert get_logger().propagate is False


def test_file_handler_added_next_to_foreign_handlers(isolated_dirs):
    foreign = logging.NullHandler()
    logging.getLogger("pomodo_cli").addHandler(foreign)

    logger = get_logger()
    logger.info("written despite other handlers")
    for handler in logger.handlers:
        handler.flush()

    assert foreign in logger.handlers
    assert any(
        isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers
    )
    log_text = (isolated_dirs / "logs" / "pomodo.log").read_text()
    assert "written despite other handlers" in log_text
