# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from taskpool.logging_setup import _ConsoleNoiseFilter, setup_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


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


def test_console_filter_lets_own_logs_through_and_mutes_others() -> None:
    f = _ConsoleNoiseFilter()

    assert f.filter(_record("taskpool.tasks.worker", logging.DEBUG))
    assert f.filter(_record("asyncio", logging.WARNING))
    assert not f.filter(_record("asyncio", logging.INFO))
    assert not f.filter(_record("py.warnings", logging.WARNING))
    assert not f.filter(_record("urllib3", logging.WARNING))
    assert f.filter(_record("urllib3", logging.ERROR))


def test_setup_logging_writes_to_returned_file(tmp_path: Path, restore_root_logger) -> None:
    log_file = setup_logging(log_dir=tmp_path / "logs", console_level=logging.ERROR)

    assert log_file == tmp_path / "logs" / "taskpool.log"
    logging.getLogger("taskpool.test").debug("scheduler trace")
    for h in logging.getLogger().handlers:
        h.flush()

    assert "scheduler trace" in log_file.read_text("utf-8")
