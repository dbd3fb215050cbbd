"""Tests for cifra.log — TRACE level and handler setup."""

from __future__ import annotations

import logging

from cifra.log import TRACE, reset_logging, setup_logging


def test_trace_level_registered():
    assert logging.getLevelName(TRACE) == "TRACE"
    assert hasattr(logging.getLogger("cifra.test"), "trace")


def test_trace_emitted_when_enabled(caplog):
    logger = logging.getLogger("cifra.test.trace")
    with caplog.at_level(TRACE, logger="cifra.test.trace"):
        logger.trace("per-char %s", "x")  # type: ignore[attr-defined]
    assert [r.levelname for r in caplog.records] == ["TRACE"]


def test_setup_logging_is_idempotent(tmp_path):
    log_file = tmp_path / "cifra.log"
    first = setup_logging(log_file=str(log_file))
    n_handlers = len(first.handlers)
    second = setup_logging(debug=True, log_file=str(tmp_path / "other.log"))
    assert first is second
    assert len(second.handlers) == n_handlers
    assert log_file.exists()


def test_reset_logging_removes_handlers(tmp_path):
    setup_logging(log_file=str(tmp_path / "cifra.log"))
    reset_logging()
    assert logging.getLogger("cifra").handlers == []


def test_passthrough_is_traced(caplog):
    from cifra.core.translator import Direction, translate

    with caplog.at_level(TRACE, logger="cifra.core.translator"):
        translate("+5", Direction.SYMBOL_TO_LETTER)
    assert any("'5'" in r.getMessage() for r in caplog.records)
