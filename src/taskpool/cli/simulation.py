# src/taskpool/cli/simulation.py

"""
Scripted demo run.

Walks through every scheduler feature in a fixed order (priority ordering,
automatic pickup on worker arrival, completion chaining, worker removal)
and prints a final summary. Pauses are configurable, down to zero.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from ..core.state import AppState
from ..core.timefmt import current_time
from ..tasks.task_api import record_final_summary

logger = logging.getLogger(__name__)


async def run_simulation(
    state: AppState,
    *,
    step_seconds: float,
    out: Callable[[str], None] = print,
) -> None:
    scheduler = state.scheduler
    # Waits sized to let one batch of tasks finish, plus a margin.
    settle = scheduler.processing_seconds + step_seconds

    async def step(title: str, action: Callable[[], object] | None = None, wait: float = 0.0) -> None:
        out(title)
        await asyncio.sleep(step_seconds)
        if action is not None:
            action()
        await asyncio.sleep(wait)
        out("")

    header = f"{getattr(state.settings, 'app_name', 'taskpool')} - Simulation Results"
    out(header + "\n")
    out(f"[{current_time()}] System initialized with 0 workers\n")
    state.record(header + "\n")
    state.record(f"[{current_time()}] System initialized with 0 workers")

    await step("Step 1: Creating a normal task...", scheduler.create_normal_task)
    await step(
        "Step 2: Creating a HIGH task (HIGH tasks have priority over normal tasks)...",
        scheduler.create_high_task,
    )
    await step("Step 3: Creating another normal task...", scheduler.create_normal_task)
    await step(
        "Step 4: Adding first worker (will automatically pick up the HIGH task first)...",
        scheduler.add_worker,
    )
    await step("Step 5: Adding second worker (will pick up the next task)...", scheduler.add_worker)
    await step(
        f"Step 6: Waiting for tasks to complete (processing time: {scheduler.processing_seconds:g}s)...",
        wait=settle,
    )
    await step(
        "Step 7: Creating another HIGH task while workers are processing...",
        scheduler.create_high_task,
    )
    await step("Step 8: Waiting for remaining tasks to complete...", wait=settle)
    await step("Step 9: Removing a worker (removes the most recently added one)...", scheduler.remove_worker)
    await step("Step 10: Waiting for any other tasks...", wait=step_seconds)

    summary = record_final_summary(state)
    out("Simulation Complete - Final Status:")
    for line in summary:
        out(line)
    logger.info("Simulation finished: %s", scheduler.get_status())
