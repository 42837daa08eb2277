"""Tests for vuepact.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from vuepact.logging import configure_logging, get_logger


def test_get_logger_nests_under_package() -> None:
    assert get_logger("scanner").name == "vuepact.scanner"
    assert get_logger().name == "vuepact"


def test_configure_logging_levels() -> None:
    assert configure_logging().level == logging.INFO
    assert configure_logging(quiet=True).level == logging.WARNING
    assert configure_logging(verbose=True, quiet=True).level == logging.DEBUG


def test_configure_logging_does_not_stack_handlers(tmp_path: Path) -> None:
    configure_logging()
    logger = configure_logging(log_file=tmp_path / "logs" / "vuepact.log")

    assert len(logger.handlers) == 2
    logger.info("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in (tmp_path / "logs" / "vuepact.log").read_text(encoding="utf-8")
    configure_logging()
