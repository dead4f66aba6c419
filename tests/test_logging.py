"""Tests for the docmake logger setup."""

from __future__ import annotations

import logging
from pathlib import Path

from docmake.logging import configure_logging, get_logger


def test_get_logger_nests_under_docmake() -> None:
    assert get_logger().name == "docmake"
    assert get_logger("detect.stack").name == "docmake.detect.stack"


def test_configure_logging_respects_verbosity() -> None:
    assert configure_logging(verbose=True).level == logging.DEBUG
    assert configure_logging().level == logging.INFO


def test_repeated_configuration_does_not_stack_handlers() -> None:
    configure_logging()
    logger = configure_logging()

    assert len(logger.handlers) == 1


def test_log_file_receives_records(tmp_path: Path) -> None:
    log_file = tmp_path / "nested" / "docmake.log"
    logger = configure_logging(verbose=True, log_file=log_file)

    get_logger("engine").debug("building %s", "alice/demo:latest")
    for handler in logger.handlers:
        handler.flush()
    configure_logging()

    content = log_file.read_text(encoding="utf-8")
    assert "DEBUG docmake.engine: building alice/demo:latest" in content
