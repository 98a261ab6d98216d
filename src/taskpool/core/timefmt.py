# src/taskpool/core/timefmt.py

from __future__ import annotations

from datetime import datetime


def format_time(dt: datetime) -> str:
    """HH:MM:SS in the timestamp's own timezone (naive timestamps are taken as local)."""
    return dt.strftime("%H:%M:%S")


def current_time() -> str:
    return format_time(datetime.now().astimezone())
