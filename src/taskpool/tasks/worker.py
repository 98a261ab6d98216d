# src/taskpool/tasks/worker.py

from __future__ import annotations

"""
Worker state machine.

A worker runs at most one task at a time:

    IDLE --assign(task)--> PROCESSING --timer fires--> IDLE   (task COMPLETE)
                                      --force_stop()-> IDLE   (task PENDING, returned)

The timer comes from an injected TimerService; completion is reported as a single
message to an injected CompletionSink, so the worker knows nothing about the scheduler.
"""

import logging

from ..core.ports import CompletionSink, TimerHandle, TimerService
from .task_models import Task, WorkerStatus

logger = logging.getLogger(__name__)


class WorkerBusyError(RuntimeError):
    """Raised when a task is assigned to a worker that is already processing one."""


class Worker:
    __slots__ = ("id", "status", "current_task", "_timer", "_timers", "_completions", "_processing_seconds")

    def __init__(
        self,
        worker_id: int,
        *,
        timers: TimerService,
        completions: CompletionSink,
        processing_seconds: float,
    ) -> None:
        if processing_seconds < 0:
            raise ValueError("processing_seconds must be >= 0")

        self.id = worker_id
        self.status = WorkerStatus.IDLE
        self.current_task: Task | None = None
        self._timer: TimerHandle | None = None
        self._timers = timers
        self._completions = completions
        self._processing_seconds = float(processing_seconds)

    def __repr__(self) -> str:
        task_id = self.current_task.id if self.current_task is not None else None
        return f"Worker(id={self.id}, status={self.status.value}, task={task_id})"

    @property
    def is_idle(self) -> bool:
        return self.status is WorkerStatus.IDLE

    @property
    def processing_seconds(self) -> float:
        return self._processing_seconds

    def assign(self, task: Task) -> None:
        """
        Start processing `task` and arm the completion timer.

        Assigning to a busy worker means the caller's bookkeeping is broken;
        we refuse before touching any state. The timer is armed first, so if the
        timer service raises the worker stays IDLE and the task stays PENDING.
        """
        if self.status is not WorkerStatus.IDLE:
            current = self.current_task.id if self.current_task is not None else None
            raise WorkerBusyError(
                f"Worker #{self.id} is already processing Task #{current}; refusing Task #{task.id}"
            )

        # The callback only runs on a later loop iteration, after the fields below are set.
        handle = self._timers.call_later(self._processing_seconds, self._on_timer)
        self._timer = handle
        self.current_task = task
        self.status = WorkerStatus.PROCESSING
        task.start_processing()
        logger.debug(
            "Worker %s assigned task %s (%.3fs)", self.id, task.id, self._processing_seconds
        )

    def force_stop(self) -> Task | None:
        """
        Abort the in-flight task (worker removal).

        Returns the task, already back in PENDING, or None when the worker was idle.
        """
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

        task = self.current_task
        if task is None:
            self.status = WorkerStatus.IDLE
            return None

        task.return_to_pending()
        self.current_task = None
        self.status = WorkerStatus.IDLE
        logger.debug("Worker %s force-stopped task %s", self.id, task.id)
        return task

    def _on_timer(self) -> None:
        if self._timer is None or self.current_task is None:
            # Cancelled handle that still got through; nothing to complete.
            logger.warning("Worker %s: stale completion timer ignored", self.id)
            return

        self._timer = None
        task = self.current_task
        task.complete()
        self.current_task = None
        self.status = WorkerStatus.IDLE
        logger.debug("Worker %s finished task %s", self.id, task.id)

        self._completions.task_completed(self, task)
