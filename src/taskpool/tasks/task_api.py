# src/taskpool/tasks/task_api.py

from __future__ import annotations

from ..core.state import AppState
from .task_models import SchedulerStatus, TaskPriority


def submit_task(state: AppState, priority: TaskPriority | str) -> int:
    """
    Convenience helper used by connectors: create a task, return its id.
    Accepts "vip"/"high"/"normal" strings as typed by a user.
    """
    if not isinstance(priority, TaskPriority):
        priority = TaskPriority.parse(priority)
    task = state.scheduler.create_task(priority)
    return task.id


def format_final_summary(status: SchedulerStatus) -> list[str]:
    return [
        f"- Total Tasks Processed: {status.total_tasks} "
        f"({status.high_tasks} HIGH, {status.normal_tasks} NORMAL)",
        f"- Tasks Completed: {status.completed_tasks}",
        f"- Active Workers: {status.workers}",
        f"- Pending Tasks: {status.pending_tasks}",
    ]


def format_status_report(state: AppState) -> str:
    """Multi-line status block shown by /status and after each recognized console command."""
    scheduler = state.scheduler
    status = scheduler.get_status()

    lines = [
        "Status:",
        f"  Tasks: {status.total_tasks} total ({status.high_tasks} HIGH, {status.normal_tasks} NORMAL)",
        f"  Pending: {status.pending_tasks}  Completed: {status.completed_tasks}",
        f"  Workers: {status.workers} ({status.idle_workers} idle, {status.processing_workers} processing)",
    ]

    pending = scheduler.get_pending_tasks()
    if pending:
        lines.append("  Pending queue: " + ", ".join(f"#{t.id} ({t.priority.value})" for t in pending))
    else:
        lines.append("  Pending queue: (empty)")

    workers = scheduler.get_workers()
    if workers:
        lines.append("  Workers:")
        for w in workers:
            if w.current_task is not None:
                lines.append(
                    f"    Worker #{w.id}: {w.status.value} "
                    f"Task #{w.current_task.id} ({w.current_task.priority.value})"
                )
            else:
                lines.append(f"    Worker #{w.id}: {w.status.value}")
    else:
        lines.append("  Workers: (none)")

    completed = scheduler.get_completed_tasks()
    if completed:
        lines.append("  Completed: " + ", ".join(f"#{t.id}" for t in completed))

    return "\n".join(lines)


def record_final_summary(state: AppState) -> list[str]:
    """Append the final summary block to the transcript; returns the summary lines."""
    summary = format_final_summary(state.scheduler.get_status())
    state.record("")
    state.record("Final Status:")
    for line in summary:
        state.record(line)
    return summary
