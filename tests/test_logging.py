"""Tests for the logging setup."""

import logging

from vcomplete.logging_setup import LogObjects, ScreenLogFormatter, get_logger, init_logger, is_debug, set_debug


def test_debug_state():
    previous = is_debug()
    try:
        set_debug(False)
        assert get_logger("tests.level").level == logging.WARNING
        set_debug(True)
        assert get_logger("tests.level").level == logging.DEBUG
    finally:
        set_debug(previous)


def test_explicit_level():
    assert get_logger("tests.explicit", level=logging.ERROR).level == logging.ERROR


def test_logger_does_not_propagate():
    assert get_logger("tests.propagate").propagate is False


def test_handlers_are_not_duplicated():
    logger = get_logger("tests.dup")
    count = len(logger.handlers)
    get_logger("tests.dup")
    assert len(logger.handlers) == count


def test_file_handler(tmp_path):
    saved = list(LogObjects.handlers)
    logfile = tmp_path / "debug.log"
    try:
        init_logger(filename=str(logfile), force_debug=True)
        logger = get_logger("tests.file")
        logger.debug("hello %s", "there")
        for handler in LogObjects.handlers:
            handler.flush()
        assert "hello there" in logfile.read_text()
    finally:
        for handler in LogObjects.handlers:
            handler.close()
        LogObjects.handlers[:] = saved


def test_screen_formatter_without_colors(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)
    assert "careful" in ScreenLogFormatter().format(record)
    assert "\x1b[" not in ScreenLogFormatter().format(record)
