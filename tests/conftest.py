# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_manager.core.state import AppState
from todo_manager.tasks.task_models import Priority
from todo_manager.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        log_to_file=False,
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "tasks.txt",
        autosave_on_exit=False,
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def filled_store(store: TaskStore) -> TaskStore:
    """Three tasks: ids 1-3, the second one completed."""
    store.add("Write report", Priority.MEDIUM, date(2030, 3, 10))
    store.add("Pay rent", Priority.HIGHEST, date(2030, 3, 1))
    store.add("Clean garage", Priority.LOWEST, date(2030, 4, 20))
    store.mark_completed(2)
    return store


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store, tasks_path=settings.tasks_path)
