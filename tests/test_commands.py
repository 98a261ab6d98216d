# tests/test_commands.py

from __future__ import annotations

from taskpool.cli.commands import CommandRegistry, registry
from taskpool.tasks.task_api import submit_task
from taskpool.tasks.task_models import TaskPriority

from .conftest import PROCESSING_SECONDS


def test_command_registry_routes_names_and_aliases(state) -> None:
    reg = CommandRegistry()
    called: list[list[str]] = []

    def handler(state, args):
        called.append(args)
        return "ok"

    reg.register("go", handler, "go somewhere", aliases=["G"])

    assert reg.handle(state, "/go x y") == "ok"
    assert reg.handle(state, "/g") == "ok"
    assert called == [["x", "y"], []]
    assert "/go - go somewhere" in reg.build_help()


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_builtin_commands_drive_scheduler(state) -> None:
    assert registry.handle(state, "/normal") is None
    assert registry.handle(state, "/vip") is None
    assert registry.handle(state, "/3") is None  # add worker

    scheduler = state.scheduler
    [worker] = scheduler.get_workers()
    assert worker.current_task.priority is TaskPriority.HIGH
    assert [t.id for t in scheduler.get_pending_tasks()] == [1001]


def test_remove_on_empty_pool_reports_it(state) -> None:
    reply = registry.handle(state, "/remove")
    assert reply is not None and reply.endswith("No workers available to remove")


def test_status_report_lists_queue_workers_and_completed(state, timers) -> None:
    registry.handle(state, "/add")
    registry.handle(state, "/normal")
    registry.handle(state, "/n")
    timers.advance(PROCESSING_SECONDS)
    registry.handle(state, "/high")

    report = registry.handle(state, "/status") or ""

    assert "Tasks: 3 total (1 HIGH, 2 NORMAL)" in report
    assert "Pending: 1  Completed: 1" in report
    assert "Pending queue: #1003 (HIGH)" in report
    assert "Worker #1: PROCESSING Task #1002 (NORMAL)" in report
    assert "Completed: #1001" in report


def test_help_lists_commands(state) -> None:
    text = registry.handle(state, "/help") or ""
    for name in ("/normal", "/vip", "/add", "/remove", "/status"):
        assert name in text


def test_submit_task_accepts_user_typed_priority(state) -> None:
    assert submit_task(state, "vip") == 1001
    assert submit_task(state, "normal") == 1002
    assert [t.priority for t in state.scheduler.get_pending_tasks()] == [TaskPriority.HIGH, TaskPriority.NORMAL]
