# src/taskpool/connectors/console_connector.py

from __future__ import annotations

import asyncio
import logging
import threading

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..core.timefmt import current_time
from ..tasks.task_api import format_status_report, record_final_summary

logger = logging.getLogger(__name__)

EXIT_WORDS = ("/exit", "/quit", "exit", "quit", "6")

MENU = "\n".join(
    [
        "-" * 60,
        "  MENU",
        "-" * 60,
        "  1. Create Normal Task     (/normal)",
        "  2. Create HIGH Task       (/vip)",
        "  3. Add Worker             (/add)",
        "  4. Remove Worker          (/remove)",
        "  5. Show Status            (/status)",
        "  6. Exit                   (/exit)",
        "-" * 60,
    ]
)


def _normalize(user_input: str) -> str:
    """Bare menu numbers are shortcuts for the matching slash command."""
    if user_input.isdigit():
        return "/" + user_input
    return user_input


def _print_ts(text: str) -> None:
    print(f"[{current_time()}] {text}", flush=True)


def _start_stdin_reader(loop: asyncio.AbstractEventLoop, lines: asyncio.Queue[str | None]) -> None:
    """
    Read stdin in a daemon thread and hand lines to the loop.

    A daemon thread (not the default executor) so a prompt blocked in input()
    never holds up interpreter shutdown. None marks EOF.
    """

    def _put(item: str | None) -> bool:
        try:
            loop.call_soon_threadsafe(lines.put_nowait, item)
        except RuntimeError:
            # Loop already closed.
            return False
        return True

    def _reader() -> None:
        while True:
            try:
                line = input()
            except (EOFError, OSError):
                _put(None)
                return
            if not _put(line):
                return

    threading.Thread(target=_reader, name="taskpool-stdin", daemon=True).start()


async def run_console_loop(state: AppState, lines: asyncio.Queue[str | None] | None = None) -> None:
    """
    Interactive menu.

    stdin is read in a background thread so that pending task timers keep firing
    while the prompt waits; commands themselves run on the event loop thread.
    Callers may pass their own `lines` queue instead of reading stdin.
    """
    app_name = str(getattr(state.settings, "app_name", "taskpool"))
    logger.info("Console connector started.")

    print("\n" + "=" * 60)
    print(f"  {app_name} - Interactive Mode")
    print("=" * 60)
    state.record(f"{app_name} - Interactive Results\n")
    state.record(f"[{current_time()}] System initialized with 0 workers")

    print(MENU)

    if lines is None:
        lines = asyncio.Queue()
        _start_stdin_reader(asyncio.get_running_loop(), lines)

    while True:
        print("Enter your choice (1-6 or /command): ", end="", flush=True)
        raw = await lines.get()
        if raw is None:
            logger.info("Console EOF received, exiting.")
            break

        user_input = raw.strip()
        if not user_input:
            continue

        if user_input.lower() in EXIT_WORDS:
            logger.info("Console exit command received.")
            break

        line = _normalize(user_input)
        try:
            reply = command_registry.handle(state, line)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is None and not user_input.startswith("/") and not user_input.isdigit():
            reply = "Invalid command. Please enter 1-6 or /help."

        if reply is not None:
            print(reply, flush=True)

        # Every recognized command is followed by the current status (once, for /status).
        if command_registry.is_command(line):
            report = format_status_report(state)
            if reply != report:
                print("\n" + report, flush=True)
        print(MENU)

    print("\n" + "=" * 60)
    _print_ts("Exiting system...")
    print("=" * 60 + "\n")

    record_final_summary(state)
    logger.info("Console connector finished.")
