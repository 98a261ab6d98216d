# src/taskpool/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "taskpool.log"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep stderr readable next to the event stream on stdout:
    - taskpool loggers pass at the handler's level
    - asyncio passes from WARNING (exceptions escaping a worker timer land there)
    - everything else, captured warnings included, only at ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name == "taskpool" or name.startswith("taskpool."):
            return True

        if name == "asyncio":
            return record.levelno >= logging.WARNING

        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/taskpool",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
    file_name: str = LOG_FILE_NAME,
) -> Path:
    """
    Route logs to stderr (filtered) and to `<log_dir>/<file_name>` (everything,
    including per-worker DEBUG traces). Replaces any handlers already on the root
    logger, so call it once at startup. Returns the log file path.
    """
    log_file = Path(log_dir) / file_name
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(min(console_level, file_level))
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    logging.captureWarnings(True)
    return log_file
