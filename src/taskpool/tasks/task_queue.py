# src/taskpool/tasks/task_queue.py

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from .task_models import Task, TaskPriority


class PriorityQueue:
    """
    Pending-task queue with two priority classes.

    Stored as two FIFO sequences (HIGH and NORMAL); the logical order is
    HIGH tasks in insertion order followed by NORMAL tasks in insertion order.
    """

    __slots__ = ("_high", "_normal")

    def __init__(self) -> None:
        self._high: deque[Task] = deque()
        self._normal: deque[Task] = deque()

    def enqueue(self, task: Task) -> None:
        """
        Insert a task at its priority position.

        HIGH lands behind the last queued HIGH task (ahead of every NORMAL one);
        NORMAL lands at the very end. A re-queued task gets no special treatment.
        """
        if task.priority is TaskPriority.HIGH:
            self._high.append(task)
        else:
            self._normal.append(task)

    def dequeue(self) -> Task | None:
        """Remove and return the front task, or None when the queue is empty."""
        if self._high:
            return self._high.popleft()
        if self._normal:
            return self._normal.popleft()
        return None

    def peek(self) -> Task | None:
        if self._high:
            return self._high[0]
        if self._normal:
            return self._normal[0]
        return None

    def size(self) -> int:
        return len(self._high) + len(self._normal)

    def is_empty(self) -> bool:
        return not self._high and not self._normal

    def snapshot(self) -> list[Task]:
        """Ordered copy of the queue; mutating it does not affect the queue."""
        return [*self._high, *self._normal]

    def clear(self) -> None:
        self._high.clear()
        self._normal.clear()

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Task]:
        yield from self._high
        yield from self._normal
