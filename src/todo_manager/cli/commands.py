# src/todo_manager/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_models import Task, TaskFilter

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

DUE_SEPARATOR = "@"


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

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
        Returns a reply string or None if not a command.
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

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _description(args: list[str]) -> str:
    # Descriptions are lookup keys: rejoin with single spaces, as typed.
    return " ".join(args)


def _format_listing(lines: list[str]) -> str:
    if not lines:
        return "No tasks."
    return "\n".join(f"{i}. {line}" for i, line in enumerate(lines, start=1))


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add Buy milk               -> task without due date
    /add Buy milk @ 2024-05-01  -> task due 2024-05-01
    """
    due_date: str | None = None
    if DUE_SEPARATOR in args:
        idx = args.index(DUE_SEPARATOR)
        due_date = " ".join(args[idx + 1 :]) or None
        args = args[:idx]

    description = _description(args)
    try:
        task = Task.builder(description).due_date(due_date).build()
    except ValueError:
        return "Usage: /add <description> [@ <due date>]"

    state.task_store.add_task(task)
    return f"Added: {task.display()}"


def cmd_done(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /done <description>"
    description = _description(args)
    depth = state.task_store.history.undo_depth
    state.task_store.mark_task_completed(description)
    if state.task_store.history.undo_depth == depth:
        return f"No task named '{description}'."
    return f"Completed: {description}"


def cmd_delete(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /del <description>"
    description = _description(args)
    before = state.task_store.count_tasks()
    state.task_store.delete_task(description)
    if state.task_store.count_tasks() == before:
        return f"No task named '{description}'."
    return f"Deleted: {description}"


def cmd_list(state: AppState, args: list[str]) -> str:
    """
    /list            -> all tasks
    /list pending    -> only pending
    /list completed  -> only completed
    """
    task_filter = TaskFilter.from_arg(args[0] if args else None)
    if task_filter is None:
        return "Usage: /list [all|pending|completed]"
    return _format_listing(state.task_store.view_tasks(task_filter))


def cmd_undo(state: AppState, args: list[str]) -> str:
    if not state.task_store.history.can_undo:
        return "Nothing to undo."
    state.task_store.undo()
    return "Undone.\n" + _format_listing(state.task_store.view_tasks(TaskFilter.ALL))


def cmd_redo(state: AppState, args: list[str]) -> str:
    if not state.task_store.history.can_redo:
        return "Nothing to redo."
    state.task_store.redo()
    return "Redone.\n" + _format_listing(state.task_store.view_tasks(TaskFilter.ALL))


def cmd_status(state: AppState, args: list[str]) -> str:
    store = state.task_store
    pending = len(store.view_tasks(TaskFilter.PENDING))
    return (
        "Status:\n"
        f"  Tasks: {store.count_tasks()} ({pending} pending)\n"
        f"  Undo steps: {store.history.undo_depth}\n"
        f"  Redo steps: {store.history.redo_depth}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <description> [@ <due date>].")
registry.register("done", cmd_done, help_text="Mark a task completed: /done <description>.")
registry.register("del", cmd_delete, help_text="Delete a task: /del <description>.", aliases=["rm"])
registry.register(
    "list", cmd_list, help_text="List tasks: /list [all|pending|completed].", aliases=["ls"]
)
registry.register("undo", cmd_undo, help_text="Undo the last add/done/del.")
registry.register("redo", cmd_redo, help_text="Redo the last undone change.")
registry.register("status", cmd_status, help_text="Show task count and undo/redo depth.")
