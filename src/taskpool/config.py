# src/taskpool/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing is read at import time; get_settings() builds and caches on first use.
- Invalid values fall back to defaults instead of crashing the CLI.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKPOOL"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float, *, minimum: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    if minimum is not None and value < minimum:
        return default
    return value


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Event transcript ----
    result_file: Path
    result_file_enabled: bool

    # ---- Scheduling ----
    processing_seconds: float
    starting_task_id: int
    starting_worker_id: int

    # ---- Scripted simulation ----
    simulation_step_seconds: float

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskpool").strip() or "taskpool"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskpool"))
        result_file = _env_path(_k("RESULT_FILE"), data_dir / "result.txt")
        result_file_enabled = _env_bool(_k("RESULT_FILE_ENABLED"), True)

        processing_seconds = _env_float(_k("PROCESSING_SECONDS"), 10.0, minimum=0.0)
        starting_task_id = _env_int(_k("STARTING_TASK_ID"), 1001)
        starting_worker_id = _env_int(_k("STARTING_WORKER_ID"), 1)

        simulation_step_seconds = _env_float(_k("SIMULATION_STEP_SECONDS"), 1.0, minimum=0.0)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            result_file=result_file,
            result_file_enabled=result_file_enabled,
            processing_seconds=processing_seconds,
            starting_task_id=starting_task_id,
            starting_worker_id=starting_worker_id,
            simulation_step_seconds=simulation_step_seconds,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        # Local .env never overrides variables already set in the environment.
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
