# src/taskpool/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum


class TaskPriority(StrEnum):
    """
    Priority class of a task.

    HIGH tasks are always assigned before NORMAL ones; FIFO within a class.
    """

    HIGH = "HIGH"
    NORMAL = "NORMAL"

    @classmethod
    def parse(cls, raw: str | None) -> TaskPriority:
        """Accept "high"/"vip"/"normal" in any case; unknown input is NORMAL."""
        value = (raw or "").strip().upper()
        if value in ("HIGH", "VIP"):
            return cls.HIGH
        return cls.NORMAL


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    The status always mirrors where the task currently lives:
    - PENDING    -> in the priority queue
    - PROCESSING -> held by exactly one worker
    - COMPLETE   -> in the scheduler's completed list
    """

    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    COMPLETE = "COMPLETE"


class WorkerStatus(StrEnum):
    IDLE = "IDLE"
    PROCESSING = "PROCESSING"


@dataclass(slots=True)
class Task:
    id: int
    priority: TaskPriority
    status: TaskStatus = TaskStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __setattr__(self, name: str, value: object) -> None:
        # The id is assigned once by the scheduler and never rebound.
        if name == "id" and hasattr(self, "id"):
            raise AttributeError(f"Task #{self.id}: id is read-only")
        object.__setattr__(self, name, value)

    @property
    def is_high(self) -> bool:
        return self.priority is TaskPriority.HIGH

    def start_processing(self) -> None:
        self.status = TaskStatus.PROCESSING

    def complete(self) -> None:
        self.status = TaskStatus.COMPLETE

    def return_to_pending(self) -> None:
        # Used when the owning worker is removed mid-flight.
        self.status = TaskStatus.PENDING


@dataclass(slots=True, frozen=True)
class SchedulerStatus:
    """Point-in-time counters; every field is derived from the scheduler's collections."""

    total_tasks: int
    high_tasks: int
    normal_tasks: int
    completed_tasks: int
    pending_tasks: int
    workers: int
    idle_workers: int
    processing_workers: int
