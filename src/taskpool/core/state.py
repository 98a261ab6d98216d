# src/taskpool/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..tasks.task_scheduler import Scheduler

if TYPE_CHECKING:
    from ..connectors.event_sinks import ResultFileWriter


@dataclass
class AppState:
    """
    Everything a connector needs to drive the scheduler.

    settings is typed loosely so tests can pass a SimpleNamespace.
    """

    settings: Any
    scheduler: Scheduler
    result_writer: ResultFileWriter | None = None

    def record(self, line: str) -> None:
        """Append a non-event line (headers, summaries) to the transcript, if enabled."""
        if self.result_writer is not None:
            self.result_writer(line)
