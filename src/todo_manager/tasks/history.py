# src/todo_manager/tasks/history.py

"""
Linear undo/redo over full copies of the task list.

Every save and every restore goes through _copy_tasks(), so a held Snapshot
never shares a Task object with the live list (and vice versa).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace

from .task_models import Task

logger = logging.getLogger(__name__)


def _copy_tasks(tasks: Iterable[Task]) -> list[Task]:
    return [replace(t) for t in tasks]


@dataclass(frozen=True, slots=True)
class Snapshot:
    tasks: tuple[Task, ...]

    @classmethod
    def capture(cls, tasks: Iterable[Task]) -> Snapshot:
        return cls(tasks=tuple(_copy_tasks(tasks)))

    def restore(self) -> list[Task]:
        return _copy_tasks(self.tasks)


class TaskHistory:
    """
    Undo and redo stacks of Snapshot.

    Callers pass the live list in and get the list to install back; the
    history never keeps a reference to the live list itself.
    """

    def __init__(self) -> None:
        self._undo: list[Snapshot] = []
        self._redo: list[Snapshot] = []

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    def record(self, tasks: Iterable[Task]) -> None:
        """Save the pre-mutation state. Call right before changing the list."""
        self._undo.append(Snapshot.capture(tasks))

    def clear_redo(self) -> None:
        if self._redo:
            logger.debug("Discarding %d redo snapshot(s)", len(self._redo))
        self._redo.clear()

    def undo(self, current: Iterable[Task]) -> list[Task] | None:
        """
        Step back one mutation.

        Returns the list to install as live state, or None if there is
        nothing to undo (current state is left untouched).
        """
        if not self._undo:
            return None
        self._redo.append(Snapshot.capture(current))
        restored = self._undo.pop().restore()
        logger.debug("Undo: undo_depth=%d redo_depth=%d", len(self._undo), len(self._redo))
        return restored

    def redo(self, current: Iterable[Task]) -> list[Task] | None:
        if not self._redo:
            return None
        self._undo.append(Snapshot.capture(current))
        restored = self._redo.pop().restore()
        logger.debug("Redo: undo_depth=%d redo_depth=%d", len(self._undo), len(self._redo))
        return restored
