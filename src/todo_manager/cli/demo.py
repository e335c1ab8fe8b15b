# src/todo_manager/cli/demo.py

"""
Scripted walkthrough: add two tasks, complete one, undo, redo.

Prints the full listing after each step so the undo/redo round-trip is visible.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..tasks.task_models import Task, TaskFilter
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _print_tasks(store: TaskStore, heading: str, out: Callable[[str], None]) -> None:
    out(heading)
    for line in store.view_tasks(TaskFilter.ALL):
        out(line)


def run_demo(store: TaskStore | None = None, out: Callable[[str], None] = print) -> TaskStore:
    store = store if store is not None else TaskStore()

    store.add_task(Task.builder("Buy groceries").due_date("2023-09-20").build())
    store.add_task(Task.builder("Submit assignment").build())
    _print_tasks(store, "All Tasks:", out)

    store.mark_task_completed("Buy groceries")
    _print_tasks(store, "\nTasks after marking 'Buy groceries' as completed:", out)

    store.undo()
    _print_tasks(store, "\nTasks after undo:", out)

    store.redo()
    _print_tasks(store, "\nTasks after redo:", out)

    logger.debug("Demo finished with %d task(s)", store.count_tasks())
    return store


def main() -> None:
    run_demo()


if __name__ == "__main__":
    main()
