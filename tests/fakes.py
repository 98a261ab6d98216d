# tests/fakes.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from taskpool.tasks.task_models import Task


@dataclass(slots=True)
class FakeTimerHandle:
    when: float
    callback: Callable[[], object]
    seq: int
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeTimers:
    """
    Manual clock implementing the TimerService port.

    Nothing fires on its own: tests call advance()/fire_next() to move time,
    which makes every completion deterministic and instant.
    """

    def __init__(self) -> None:
        self.now = 0.0
        self._seq = 0
        self.handles: list[FakeTimerHandle] = []

    def call_later(self, delay: float, callback: Callable[[], object]) -> FakeTimerHandle:
        self._seq += 1
        handle = FakeTimerHandle(when=self.now + delay, callback=callback, seq=self._seq)
        self.handles.append(handle)
        return handle

    def pending(self) -> list[FakeTimerHandle]:
        return sorted(
            (h for h in self.handles if not h.cancelled),
            key=lambda h: (h.when, h.seq),
        )

    def fire_next(self) -> bool:
        """Fire the earliest live timer; False when there is none."""
        live = self.pending()
        if not live:
            return False
        handle = live[0]
        self.handles.remove(handle)
        self.now = max(self.now, handle.when)
        handle.callback()
        return True

    def advance(self, seconds: float) -> None:
        """Move time forward, firing (in order) every timer that comes due, including new ones."""
        deadline = self.now + seconds
        while True:
            live = [h for h in self.pending() if h.when <= deadline]
            if not live:
                break
            self.fire_next()
        self.now = deadline


@dataclass(slots=True)
class EventRecorder:
    """Notifier that keeps every event line for assertions."""

    lines: list[str] = field(default_factory=list)

    def __call__(self, line: str) -> None:
        self.lines.append(line)

    def containing(self, text: str) -> list[str]:
        return [line for line in self.lines if text in line]


@dataclass(slots=True)
class RecordingCompletions:
    """CompletionSink used by worker unit tests."""

    completed: list[tuple[int, Task]] = field(default_factory=list)

    def task_completed(self, worker, task: Task) -> None:
        self.completed.append((worker.id, task))


class ClosedLoopTimers:
    """TimerService whose event loop is gone: every call_later raises."""

    def call_later(self, delay: float, callback: Callable[[], object]) -> FakeTimerHandle:
        raise RuntimeError("Event loop is closed")
