"""Priority task assignment over a resizable worker pool."""

from taskpool.tasks.task_models import SchedulerStatus, Task, TaskPriority, TaskStatus, WorkerStatus
from taskpool.tasks.task_queue import PriorityQueue
from taskpool.tasks.task_scheduler import Scheduler
from taskpool.tasks.worker import Worker, WorkerBusyError

__all__ = [
    "PriorityQueue",
    "Scheduler",
    "SchedulerStatus",
    "Task",
    "TaskPriority",
    "TaskStatus",
    "Worker",
    "WorkerBusyError",
    "WorkerStatus",
]
