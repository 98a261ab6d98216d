# src/taskpool/cli/main.py

"""
CLI entrypoint.

Initializes logging, then runs one connector inside a single asyncio loop:
- the interactive console (default),
- or the scripted simulation (--simulate).
The loop owns every worker timer; the scheduler is shut down before it closes.
"""

from __future__ import annotations

import argparse
import asyncio
import logging

from ..cli.bootstrap import create_initial_state
from ..cli.simulation import run_simulation
from ..config import Settings, get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskpool",
        description="Assign HIGH/NORMAL priority tasks to a resizable pool of workers.",
    )
    parser.add_argument(
        "--simulate",
        action="store_true",
        help="run the scripted demo instead of the interactive console",
    )
    return parser


async def _run(settings: Settings, simulate: bool) -> None:
    state = create_initial_state(settings=settings)
    try:
        if simulate:
            await run_simulation(state, step_seconds=settings.simulation_step_seconds)
        else:
            await run_console_loop(state)
    finally:
        state.scheduler.shutdown()


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.INFO)
    log_file = setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s (log file: %s)...", settings.app_name, log_file)

    try:
        asyncio.run(_run(settings, args.simulate))
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt, exiting.")
        print()
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
