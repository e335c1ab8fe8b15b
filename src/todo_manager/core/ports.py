# src/todo_manager/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command layer.

Commands depend on this Protocol instead of TaskStore directly, so tests
and alternative frontends can plug in their own implementation.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task


class HistoryView(Protocol):
    @property
    def can_undo(self) -> bool: ...
    @property
    def can_redo(self) -> bool: ...
    @property
    def undo_depth(self) -> int: ...
    @property
    def redo_depth(self) -> int: ...


class TaskRepo(Protocol):
    @property
    def history(self) -> HistoryView: ...

    def count_tasks(self) -> int: ...
    def add_task(self, task: Task) -> None: ...
    def mark_task_completed(self, description: str) -> None: ...
    def delete_task(self, description: str) -> None: ...
    def view_tasks(self, task_filter: str = ...) -> list[str]: ...
    def undo(self) -> None: ...
    def redo(self) -> None: ...
