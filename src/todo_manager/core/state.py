# src/todo_manager/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from .ports import TaskRepo


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules.
    settings: object

    task_store: TaskRepo

    # Held by frontends around each command; TaskStore itself is not thread-safe.
    lock: threading.Lock = field(default_factory=threading.Lock)
