# src/todo_manager/cli/render.py

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from ..tasks.task_models import Task

# (header, width)
COLUMNS: tuple[tuple[str, int], ...] = (
    ("ID", 5),
    ("Description", 25),
    ("Priority", 10),
    ("Status", 10),
    ("Due Date", 20),
)


def format_due_date(due_at: int) -> str:
    try:
        return datetime.fromtimestamp(due_at).strftime("%Y-%m-%d")
    except (OverflowError, OSError, ValueError):
        return "InvalidDate"


def status_label(completed: bool) -> str:
    return "Completed" if completed else "Pending"


def _row(cells: Iterable[str]) -> str:
    return "".join(f"{c:<{w}}" for c, (_, w) in zip(cells, COLUMNS)).rstrip()


def format_task_table(tasks: Iterable[Task]) -> str:
    lines = [_row(h for h, _ in COLUMNS)]
    for t in tasks:
        lines.append(
            _row(
                (
                    str(t.id),
                    t.description,
                    t.priority.label,
                    status_label(t.completed),
                    format_due_date(t.due_at),
                )
            )
        )
    return "\n".join(lines)


def format_percentage(value: float) -> str:
    return f"{value:.2f}%"
