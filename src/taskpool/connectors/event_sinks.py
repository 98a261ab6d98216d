# src/taskpool/connectors/event_sinks.py

"""
Event sinks for the scheduler's notification stream.

The scheduler hands every event to one callable taking a single line.
These helpers provide the concrete destinations used by the CLI:
- console_sink: print to stdout,
- ResultFileWriter: append to a transcript file (truncated on open),
- fan_out: deliver one line to several sinks, isolating their failures.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from ..core.ports import EventNotifier

logger = logging.getLogger(__name__)


def console_sink(line: str) -> None:
    print(line, flush=True)


class ResultFileWriter:
    """
    Best-effort transcript writer.

    A transcript that cannot be written must never take the scheduler down:
    failures are logged once per call and otherwise ignored.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text("", encoding="utf-8")
        except OSError:
            logger.exception("Failed to reset result file %s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    def __call__(self, line: str) -> None:
        try:
            with self._path.open("a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError:
            logger.exception("Failed to append to result file %s", self._path)


def fan_out(*sinks: Callable[[str], None]) -> EventNotifier:
    """Combine sinks into one notifier; a failing sink does not stop the others."""

    def _notify(line: str) -> None:
        for sink in sinks:
            try:
                sink(line)
            except Exception:
                logger.exception("Event sink %r failed", sink)

    return _notify
