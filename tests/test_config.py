# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from todo_manager.config import Settings
from todo_manager.logging_setup import setup_logging


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("APP_NAME", "LOG_LEVEL", "LOG_TO_FILE", "CONSOLE_ENABLED", "DATA_DIR"):
        monkeypatch.delenv(f"TODO_{name}", raising=False)

    s = Settings.from_env()
    assert s.app_name == "todo"
    assert s.log_level == "INFO"
    assert s.log_to_file is True
    assert s.console_enabled is True
    assert s.data_dir == Path(".local/todo")


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_APP_NAME", "tasks")
    monkeypatch.setenv("TODO_LOG_LEVEL", "debug")
    monkeypatch.setenv("TODO_LOG_TO_FILE", "off")
    monkeypatch.setenv("TODO_CONSOLE_ENABLED", "0")
    monkeypatch.setenv("TODO_DATA_DIR", str(tmp_path))

    s = Settings.from_env()
    assert s.app_name == "tasks"
    assert s.log_level == "DEBUG"
    assert s.log_to_file is False
    assert s.console_enabled is False
    assert s.data_dir == tmp_path


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    try:
        setup_logging(log_dir=tmp_path, console_level=logging.WARNING)
        logging.getLogger("todo_manager.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert "hello file" in (tmp_path / "todo.log").read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved[0]:
            root.addHandler(h)
        root.setLevel(saved[1])
        logging.captureWarnings(False)
