# src/taskpool/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the running event loop (timers) and the event sinks into a Scheduler,
- returns the AppState that connectors drive.
"""

from __future__ import annotations

import asyncio
import logging

from ..config import get_settings
from ..connectors.event_sinks import ResultFileWriter, console_sink, fan_out
from ..core.ports import EventNotifier, TimerService
from ..core.state import AppState
from ..tasks.task_scheduler import Scheduler

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    if settings.result_file_enabled:
        settings.result_file.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(
    *,
    settings=None,
    timers: TimerService | None = None,
    echo: EventNotifier | None = console_sink,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and the timer source injectable makes the app easier to test.
    If settings is None, falls back to get_settings(); if timers is None, the
    currently running asyncio loop is used (so call this from inside asyncio.run).
    """
    if settings is None:
        settings = get_settings()
    if timers is None:
        timers = asyncio.get_running_loop()

    _ensure_local_dirs(settings)

    result_writer: ResultFileWriter | None = None
    sinks: list[EventNotifier] = []
    if echo is not None:
        sinks.append(echo)
    if settings.result_file_enabled:
        result_writer = ResultFileWriter(settings.result_file)
        sinks.append(result_writer)

    scheduler = Scheduler(
        timers=timers,
        notify=fan_out(*sinks),
        processing_seconds=settings.processing_seconds,
        starting_task_id=settings.starting_task_id,
        starting_worker_id=settings.starting_worker_id,
    )
    logger.info(
        "Scheduler ready processing_seconds=%s first_task=%s first_worker=%s result_file=%s",
        settings.processing_seconds,
        settings.starting_task_id,
        settings.starting_worker_id,
        result_writer.path if result_writer is not None else None,
    )

    return AppState(settings=settings, scheduler=scheduler, result_writer=result_writer)
