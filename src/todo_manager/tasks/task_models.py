# src/todo_manager/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TaskFilter(StrEnum):
    """
    Display modes understood by TaskStore.view_tasks().

    Values are the exact strings callers pass; anything else matches no task.
    """

    ALL = "Show all"
    COMPLETED = "Show completed"
    PENDING = "Show pending"

    @classmethod
    def from_arg(cls, raw: str | None) -> TaskFilter | None:
        """Map a short console argument (all/pending/completed) to a filter."""
        if not raw:
            return cls.ALL
        key = raw.strip().lower()
        return {
            "all": cls.ALL,
            "completed": cls.COMPLETED,
            "done": cls.COMPLETED,
            "pending": cls.PENDING,
            "open": cls.PENDING,
        }.get(key)


@dataclass(frozen=True, slots=True)
class Task:
    description: str
    due_date: str | None = None
    completed: bool = False

    def __post_init__(self) -> None:
        if not self.description or not self.description.strip():
            raise ValueError("description is required")

    @staticmethod
    def builder(description: str) -> TaskBuilder:
        return TaskBuilder(description)

    def mark_completed(self) -> None:
        # Only field allowed to change after construction.
        object.__setattr__(self, "completed", True)

    def matches(self, task_filter: str) -> bool:
        if task_filter == TaskFilter.ALL:
            return True
        if task_filter == TaskFilter.COMPLETED:
            return self.completed
        if task_filter == TaskFilter.PENDING:
            return not self.completed
        return False

    def display(self) -> str:
        """
        Render as "<description> - <Completed|Pending>[, Due: <due_date>]".

        The due suffix is emitted whenever due_date is set, even to "".
        """
        text = f"{self.description} - {'Completed' if self.completed else 'Pending'}"
        if self.due_date is not None:
            text += f", Due: {self.due_date}"
        return text

    def __str__(self) -> str:
        return self.display()


class TaskBuilder:
    """Fluent construction: Task.builder("Pay rent").due_date("2024-01-01").build()."""

    def __init__(self, description: str) -> None:
        self._description = description
        self._due_date: str | None = None

    def due_date(self, due_date: str | None) -> TaskBuilder:
        self._due_date = due_date
        return self

    def build(self) -> Task:
        return Task(description=self._description, due_date=self._due_date)


def new_task(description: str, due_date: str | None = None) -> Task:
    return Task(description=description, due_date=due_date)
