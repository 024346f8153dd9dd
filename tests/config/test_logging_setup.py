# topmark:header:start
#
#   project      : ObjKit
#   file         : test_logging_setup.py
#   file_relpath : tests/config/test_logging_setup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for ObjKit logging helpers (TRACE level, env resolution, formatter)."""

from __future__ import annotations

import logging

import pytest

from objkit.config.logging import (
    TRACE_LEVEL,
    ChalkFormatter,
    ObjkitLogger,
    get_logger,
    parse_log_level,
    resolve_env_log_level,
    setup_logging,
)
from objkit.constants import LOG_LEVEL_ENV
from tests.conftest import parametrize


@parametrize(
    "raw, expected",
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("10", 10),
        ("loud", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_log_level(raw: str | None, expected: int | None) -> None:
    assert parse_log_level(raw) == expected


def test_resolve_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    assert resolve_env_log_level() is None
    monkeypatch.setenv(LOG_LEVEL_ENV, "INFO")
    assert resolve_env_log_level() == logging.INFO


def test_get_logger_returns_objkit_logger() -> None:
    logger = get_logger("objkit.tests.sample")
    assert isinstance(logger, ObjkitLogger)


def test_trace_is_emitted_at_trace_level(caplog: pytest.LogCaptureFixture) -> None:
    logger = get_logger("objkit.tests.trace")
    with caplog.at_level(TRACE_LEVEL):
        logger.trace("hello %s", "trace")
    assert [r.levelname for r in caplog.records] == ["TRACE"]
    assert caplog.records[0].getMessage() == "hello trace"


def test_setup_logging_replaces_root_handlers() -> None:
    root = logging.getLogger()
    previous_level = root.level
    try:
        setup_logging(logging.INFO)
        setup_logging(logging.INFO)
        chalk_handlers = [h for h in root.handlers if isinstance(h.formatter, ChalkFormatter)]
        assert len(chalk_handlers) == 1
        assert root.level == logging.INFO
    finally:
        setup_logging(previous_level)


def test_chalk_formatter_keeps_message_text() -> None:
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)
    assert "careful" in ChalkFormatter("%(message)s").format(record)
