# src/taskpool/tasks/task_scheduler.py

from __future__ import annotations

"""
Task scheduler.

Owns the worker pool and the pending-task queue and binds one to the other:
- creating a task or adding a worker triggers an assignment pass,
- a worker finishing its task triggers another pass,
- removing a worker preempts its task, re-queues it, and triggers a pass.

Everything runs on one thread (the event loop that owns the timers), so each event
is handled to completion before the next one starts; no locking is needed.

Presentation is not our concern: every event is pushed as one pre-formatted line
to the injected notifier, and the notifier's own failures never abort an operation.
"""

import itertools
import logging
from collections.abc import Callable

from ..core.ports import EventNotifier, TimerService
from ..core.timefmt import current_time
from .task_models import SchedulerStatus, Task, TaskPriority
from .task_queue import PriorityQueue
from .worker import Worker

logger = logging.getLogger(__name__)

DEFAULT_PROCESSING_SECONDS = 10.0
DEFAULT_STARTING_TASK_ID = 1001
DEFAULT_STARTING_WORKER_ID = 1


class Scheduler:
    def __init__(
        self,
        *,
        timers: TimerService,
        notify: EventNotifier | None = None,
        processing_seconds: float = DEFAULT_PROCESSING_SECONDS,
        starting_task_id: int = DEFAULT_STARTING_TASK_ID,
        starting_worker_id: int = DEFAULT_STARTING_WORKER_ID,
        timestamp: Callable[[], str] = current_time,
    ) -> None:
        if processing_seconds < 0:
            raise ValueError("processing_seconds must be >= 0")

        self._timers = timers
        self._notify = notify
        self._timestamp = timestamp
        self._processing_seconds = float(processing_seconds)

        self._task_ids = itertools.count(int(starting_task_id))
        self._worker_ids = itertools.count(int(starting_worker_id))

        self._tasks: list[Task] = []  # every task ever created, creation order
        self._queue = PriorityQueue()
        self._completed: list[Task] = []
        self._workers: list[Worker] = []  # insertion order; removal pops the newest

    @property
    def processing_seconds(self) -> float:
        return self._processing_seconds

    # ---- events ----

    def _emit(self, message: str) -> None:
        line = f"[{self._timestamp()}] {message}"
        logger.debug("event: %s", message)
        if self._notify is None:
            return
        try:
            self._notify(line)
        except Exception:
            logger.exception("Event notifier failed; message=%r", line)

    # ---- public API ----

    def create_task(self, priority: TaskPriority) -> Task:
        priority = TaskPriority(priority)
        task = Task(id=next(self._task_ids), priority=priority)
        self._tasks.append(task)
        self._queue.enqueue(task)
        self._emit(f"Created {task.priority.value} Task #{task.id} - Status: {task.status.value}")

        self._assign_pending()
        return task

    def create_normal_task(self) -> Task:
        return self.create_task(TaskPriority.NORMAL)

    def create_high_task(self) -> Task:
        return self.create_task(TaskPriority.HIGH)

    def add_worker(self) -> Worker:
        worker = Worker(
            next(self._worker_ids),
            timers=self._timers,
            completions=self,
            processing_seconds=self._processing_seconds,
        )
        self._workers.append(worker)
        self._emit(f"Worker #{worker.id} created - Status: ACTIVE")

        self._assign_pending()
        return worker

    def remove_worker(self) -> Worker | None:
        """
        Remove the most recently added worker.

        A task it was processing goes back to PENDING and is re-queued by the usual
        priority rule (behind HIGH tasks queued in the meantime), not at its old position.
        """
        if not self._workers:
            return None

        worker = self._workers.pop()
        task = worker.force_stop()

        if task is None:
            self._emit(f"Worker #{worker.id} destroyed while IDLE")
            return worker

        self._queue.enqueue(task)
        self._emit(f"Worker #{worker.id} destroyed while processing Task #{task.id}")

        self._assign_pending()
        return worker

    def get_status(self) -> SchedulerStatus:
        high = sum(1 for t in self._tasks if t.is_high)
        idle = sum(1 for w in self._workers if w.is_idle)
        return SchedulerStatus(
            total_tasks=len(self._tasks),
            high_tasks=high,
            normal_tasks=len(self._tasks) - high,
            completed_tasks=len(self._completed),
            pending_tasks=self._queue.size(),
            workers=len(self._workers),
            idle_workers=idle,
            processing_workers=len(self._workers) - idle,
        )

    def get_pending_tasks(self) -> list[Task]:
        return self._queue.snapshot()

    def get_completed_tasks(self) -> list[Task]:
        return list(self._completed)

    def get_workers(self) -> list[Worker]:
        return list(self._workers)

    def shutdown(self) -> None:
        """
        Stop all in-flight work without emitting events.

        Cancels every pending timer so nothing fires into a closed event loop;
        interrupted tasks are returned to the queue. This is terminal: workers are
        left idle next to a non-empty queue, so the scheduler must not be used
        after it.
        """
        for worker in self._workers:
            task = worker.force_stop()
            if task is not None:
                self._queue.enqueue(task)
        logger.info("Scheduler shut down (pending=%d)", self._queue.size())

    # ---- internals ----

    def _assign_pending(self) -> None:
        """
        Bind queued tasks to idle workers.

        Idle workers are visited in pool insertion order and the queue front is
        handed out first, so the outcome depends only on queue and pool contents.
        """
        if self._queue.is_empty():
            return

        for worker in [w for w in self._workers if w.is_idle]:
            task = self._queue.peek()
            if task is None:
                break

            # Only dequeue once the worker has accepted; a failed assign leaves the task queued.
            worker.assign(task)
            self._queue.dequeue()
            self._emit(
                f"Worker #{worker.id} picked up {task.priority.value} Task #{task.id} "
                f"- Status: {task.status.value}"
            )

    def task_completed(self, worker: Worker, task: Task) -> None:
        """CompletionSink: a worker's timer fired and `task` is now COMPLETE."""
        if worker not in self._workers:
            logger.warning("Completion from removed worker %s ignored (task %s)", worker.id, task.id)
            return

        self._completed.append(task)
        self._emit(
            f"Worker #{worker.id} completed {task.priority.value} Task #{task.id} "
            f"- Status: {task.status.value}"
        )

        self._assign_pending()

        if worker.is_idle and self._queue.is_empty():
            self._emit(f"Worker #{worker.id} is now IDLE - No pending tasks")
