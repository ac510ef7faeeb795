# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from logging_setup import setup_logging


@pytest.fixture()
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_setup_logging_writes_file(tmp_path: Path, restore_root_logger) -> None:
    log_file = tmp_path / "logs" / "tasks.log"

    setup_logging("debug", log_file)
    logging.getLogger("core.tasks").info("Created task %s", "abc")
    for h in logging.getLogger().handlers:
        h.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "INFO core.tasks: Created task abc" in text
    assert logging.getLogger().level == logging.DEBUG


def test_setup_logging_console_only(restore_root_logger) -> None:
    setup_logging("WARNING")

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert not isinstance(root.handlers[0], logging.FileHandler)


def test_unknown_level_falls_back_to_info(restore_root_logger) -> None:
    setup_logging("chatty")
    assert logging.getLogger().level == logging.INFO
