# src/todo_manager/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings are kept on the state so handlers never read global config.
    settings: object
    task_store: TaskStore
    tasks_path: Path
