# src/taskpool/cli/commands.py

from __future__ import annotations

from collections.abc import Callable

from ..core.state import AppState
from ..core.timefmt import current_time
from ..tasks.task_api import format_status_report, submit_task
from ..tasks.task_models import TaskPriority

CommandHandler = Callable[[AppState, list[str]], str | None]


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string, or None if the line is not a command
        (or the command has nothing to add beyond the events it triggered).
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def is_command(self, line: str) -> bool:
        """True when `line` is "/name ..." with a registered name or alias."""
        if not line.startswith("/"):
            return False
        parts = line[1:].split()
        return bool(parts) and parts[0].lower() in self._handlers

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_normal(state: AppState, args: list[str]) -> str | None:
    submit_task(state, TaskPriority.NORMAL)
    return None


def cmd_vip(state: AppState, args: list[str]) -> str | None:
    submit_task(state, TaskPriority.HIGH)
    return None


def cmd_add(state: AppState, args: list[str]) -> str | None:
    state.scheduler.add_worker()
    return None


def cmd_remove(state: AppState, args: list[str]) -> str | None:
    removed = state.scheduler.remove_worker()
    if removed is None:
        return f"[{current_time()}] No workers available to remove"
    return None


def cmd_status(state: AppState, args: list[str]) -> str:
    return format_status_report(state)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("normal", cmd_normal, help_text="Create a NORMAL task.", aliases=["n", "1"])
registry.register("vip", cmd_vip, help_text="Create a HIGH priority task.", aliases=["high", "2"])
registry.register("add", cmd_add, help_text="Add a worker.", aliases=["+", "3"])
registry.register(
    "remove", cmd_remove, help_text="Remove the newest worker (its task goes back to pending).", aliases=["-", "4"]
)
registry.register("status", cmd_status, help_text="Show queue, workers and counters.", aliases=["5"])
