# tests/test_task_models.py

from __future__ import annotations

import pytest

from taskpool.tasks.task_models import Task, TaskPriority, TaskStatus


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("high", TaskPriority.HIGH),
        ("VIP", TaskPriority.HIGH),
        (" normal ", TaskPriority.NORMAL),
        ("", TaskPriority.NORMAL),
        (None, TaskPriority.NORMAL),
        ("weird", TaskPriority.NORMAL),
    ],
)
def test_priority_parse(raw, expected) -> None:
    assert TaskPriority.parse(raw) is expected


def test_task_transitions() -> None:
    task = Task(id=7, priority=TaskPriority.HIGH)
    assert task.status is TaskStatus.PENDING
    assert task.is_high
    assert task.created_at.tzinfo is not None

    task.start_processing()
    assert task.status is TaskStatus.PROCESSING
    task.return_to_pending()
    assert task.status is TaskStatus.PENDING
    task.start_processing()
    task.complete()
    assert task.status is TaskStatus.COMPLETE


def test_task_id_is_read_only() -> None:
    task = Task(id=1001, priority=TaskPriority.NORMAL)

    with pytest.raises(AttributeError):
        task.id = 1002

    assert task.id == 1001
    task.status = TaskStatus.PROCESSING
    assert task.status is TaskStatus.PROCESSING
