# tests/test_cli.py

from __future__ import annotations

from collections.abc import Iterator

import pytest

from todo_manager.cli.bootstrap import create_initial_state
from todo_manager.cli.demo import run_demo
from todo_manager.connectors.console_connector import run_console_loop


def test_demo_prints_each_stage(capsys) -> None:
    store = run_demo()
    out = capsys.readouterr().out.splitlines()

    assert out == [
        "All Tasks:",
        "Buy groceries - Pending, Due: 2023-09-20",
        "Submit assignment - Pending",
        "",
        "Tasks after marking 'Buy groceries' as completed:",
        "Buy groceries - Completed, Due: 2023-09-20",
        "Submit assignment - Pending",
        "",
        "Tasks after undo:",
        "Buy groceries - Pending, Due: 2023-09-20",
        "Submit assignment - Pending",
        "",
        "Tasks after redo:",
        "Buy groceries - Completed, Due: 2023-09-20",
        "Submit assignment - Pending",
    ]
    assert store.count_tasks() == 2


def test_create_initial_state_starts_empty(settings) -> None:
    state = create_initial_state(settings=settings)
    assert state.task_store.count_tasks() == 0
    assert not state.task_store.history.can_undo
    assert state.settings is settings


def _scripted(lines: list[str]):
    it: Iterator[str] = iter(lines)

    def read_line(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read_line


def test_console_loop_runs_commands_until_exit(state, capsys) -> None:
    run_console_loop(state, read_line=_scripted(["/add a", "", "hello", "/done a", "/exit", "/add b"]))
    out = capsys.readouterr().out

    assert "Added: a - Pending" in out
    assert "Commands start with '/'" in out
    assert "Completed: a" in out
    assert state.task_store.view_tasks("Show all") == ["a - Completed"]


def test_console_loop_stops_on_eof(state) -> None:
    run_console_loop(state, read_line=_scripted(["/add a"]))
    assert state.task_store.count_tasks() == 1


def test_console_loop_survives_handler_crash(state, capsys, monkeypatch: pytest.MonkeyPatch) -> None:
    def boom() -> None:
        raise RuntimeError("boom")

    monkeypatch.setattr(state.task_store, "undo", boom)
    state.task_store.history.record([])

    run_console_loop(state, read_line=_scripted(["/undo", "/add a"]))
    out = capsys.readouterr().out

    assert "Internal error while handling a command." in out
    assert state.task_store.count_tasks() == 1
