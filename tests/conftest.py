# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpool.core.state import AppState
from taskpool.tasks.task_scheduler import Scheduler

from .fakes import EventRecorder, FakeTimers

PROCESSING_SECONDS = 10.0


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI helpers.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="taskpool-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        result_file=tmp_path / "result.txt",
        result_file_enabled=True,
        processing_seconds=PROCESSING_SECONDS,
        starting_task_id=1001,
        starting_worker_id=1,
        simulation_step_seconds=0.0,
    )


@pytest.fixture()
def timers() -> FakeTimers:
    return FakeTimers()


@pytest.fixture()
def events() -> EventRecorder:
    return EventRecorder()


@pytest.fixture()
def scheduler(timers: FakeTimers, events: EventRecorder) -> Scheduler:
    """Scheduler on a manual clock with a fixed timestamp, so event lines are stable."""
    return Scheduler(
        timers=timers,
        notify=events,
        processing_seconds=PROCESSING_SECONDS,
        timestamp=lambda: "12:00:00",
    )


@pytest.fixture()
def state(settings: SimpleNamespace, scheduler: Scheduler) -> AppState:
    return AppState(settings=settings, scheduler=scheduler)
