# src/taskpool/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the scheduling core.

The core depends on Protocols instead of concrete implementations.
This keeps the timer source and the event sinks swappable and makes testing easier:
- production wires an asyncio event loop as the TimerService,
- tests wire a manual clock that fires timers on demand.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task
    from ..tasks.worker import Worker

EventNotifier = Callable[[str], None]
# Receives one pre-formatted, human-readable line per scheduler event.


class TimerHandle(Protocol):
    """A pending timed callback that can be cancelled (asyncio.TimerHandle fits)."""

    def cancel(self) -> None: ...


class TimerService(Protocol):
    """
    Source of one-shot timers.

    asyncio.AbstractEventLoop satisfies this directly via loop.call_later(...).
    A cancelled handle must never invoke its callback.
    """

    def call_later(self, delay: float, callback: Callable[[], object]) -> TimerHandle: ...


class CompletionSink(Protocol):
    """
    Worker-side port: where a worker reports that its current task finished.

    Sent exactly once per assignment, from inside the timer callback,
    after the worker has already returned to IDLE.
    """

    def task_completed(self, worker: Worker, task: Task) -> None: ...
