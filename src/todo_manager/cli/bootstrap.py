# src/todo_manager/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- ensures local (gitignored) directories exist,
- builds the one TaskStore for this run and loads the task file into it,
- saves on the way out when autosave is enabled.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_codec import load_tasks, save_tasks
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    Path(settings.tasks_path).parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings(). An unreadable task
    file is logged and the app starts with an empty list; saving will then
    try to overwrite that file.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    tasks_path = Path(settings.tasks_path)
    store = TaskStore()
    try:
        load_tasks(store, tasks_path)
    except (OSError, ValueError):
        logger.exception("Failed to read task file %s", tasks_path)

    return AppState(settings=settings, task_store=store, tasks_path=tasks_path)


def shutdown(state: AppState) -> None:
    """Autosave (if enabled). No exceptions escape."""
    if not getattr(state.settings, "autosave_on_exit", False):
        return
    try:
        save_tasks(state.task_store, state.tasks_path)
    except OSError:
        logger.exception("Autosave to %s failed.", state.tasks_path)
