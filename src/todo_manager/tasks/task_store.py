# src/todo_manager/tasks/task_store.py

from __future__ import annotations

import logging

from .history import TaskHistory
from .task_models import Task, TaskFilter

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory ordered task list with linear undo/redo.

    Mutations (add / complete / delete):
    - record a snapshot of the current list
    - apply the change
    - drop the redo branch

    Lookups by description are exact and hit the first match only.
    Missing descriptions and empty history are silent no-ops.

    Thread-safety:
    - none; the owner must serialize calls (see AppState.lock)
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._history = TaskHistory()
        logger.info("TaskStore ready (in-memory)")

    # ---- low-level helpers ----

    def _find_index(self, description: str) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.description == description:
                return i
        return None

    # ---- public API ----

    @property
    def history(self) -> TaskHistory:
        return self._history

    def count_tasks(self) -> int:
        return len(self._tasks)

    def add_task(self, task: Task) -> None:
        self._history.record(self._tasks)
        self._tasks.append(task)
        self._history.clear_redo()
        logger.debug("Task added description=%r due_date=%s", task.description, task.due_date)

    def mark_task_completed(self, description: str) -> None:
        idx = self._find_index(description)
        if idx is None:
            logger.debug("mark_task_completed: no task description=%r", description)
            return

        self._history.record(self._tasks)
        self._tasks[idx].mark_completed()
        self._history.clear_redo()
        logger.debug("Task completed description=%r", description)

    def delete_task(self, description: str) -> None:
        idx = self._find_index(description)
        if idx is None:
            logger.debug("delete_task: no task description=%r", description)
            return

        self._history.record(self._tasks)
        del self._tasks[idx]
        self._history.clear_redo()
        logger.debug("Task deleted description=%r", description)

    def view_tasks(self, task_filter: str = TaskFilter.ALL) -> list[str]:
        """
        Display strings for tasks matching the filter, in insertion order.

        Recognized filters: "Show all", "Show completed", "Show pending".
        Any other value yields an empty list.
        """
        return [t.display() for t in self._tasks if t.matches(task_filter)]

    def undo(self) -> None:
        restored = self._history.undo(self._tasks)
        if restored is None:
            logger.debug("undo: history empty")
            return
        self._tasks = restored

    def redo(self) -> None:
        restored = self._history.redo(self._tasks)
        if restored is None:
            logger.debug("redo: nothing to redo")
            return
        self._tasks = restored
