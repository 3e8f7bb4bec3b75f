# src/todo_manager/tasks/task_store.py

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable
from datetime import date
from typing import Any

from .errors import NotFoundError
from .task_models import Task, TaskDraft, TaskUpdate, due_timestamp, validate_task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task collection.

    The store is the only owner of Task records:
    - ids come from a per-store counter (1 + max id), never from callers
    - every mutation validates the resulting description/priority first
    - order is insertion order until one of the sort methods rewrites it

    The bootstrap builds one store and passes it around explicitly.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def next_id(self) -> int:
        return self._next_id

    # ---- low-level helpers ----

    def _create(self, description: str, priority: Any, due_at: int, completed: bool = False) -> Task:
        prio = validate_task(description, priority)
        task = Task(
            id=self._next_id,
            description=description,
            priority=prio,
            due_at=int(due_at),
            completed=bool(completed),
        )
        self._next_id += 1
        self._tasks.append(task)
        return task

    def _index_of(self, task_id: int) -> int:
        for idx, task in enumerate(self._tasks):
            if task.id == task_id:
                return idx
        logger.warning("No task found with ID %s.", task_id)
        raise NotFoundError(task_id)

    # ---- mutations ----

    def add(self, description: str, priority: Any, due_date: date) -> Task:
        task = self._create(description, priority, due_timestamp(due_date))
        logger.debug(
            "Task added id=%s priority=%s due_at=%s", task.id, task.priority.label, task.due_at
        )
        return task

    def replace_all(self, drafts: Iterable[TaskDraft]) -> int:
        """
        Replace the whole collection (used by the file loader).

        Ids restart at 1 and follow the order of `drafts`. All drafts are
        validated before the current collection is dropped.
        """
        drafts = list(drafts)
        for draft in drafts:
            validate_task(draft.description, draft.priority)

        self._tasks = []
        self._next_id = 1
        for draft in drafts:
            self._create(draft.description, draft.priority, draft.due_at, draft.completed)
        if self._tasks:
            self._next_id = max(t.id for t in self._tasks) + 1
        logger.debug("Task collection replaced total=%s next_id=%s", len(self._tasks), self._next_id)
        return len(self._tasks)

    def update(self, task_id: int, changes: TaskUpdate) -> Task:
        """
        Apply a partial update atomically.

        The merged record is built and validated before it replaces the
        current one, so a rejected update leaves every field untouched.
        """
        idx = self._index_of(task_id)
        current = self._tasks[idx]

        description = changes.description.or_else(current.description)
        priority = validate_task(description, changes.priority.or_else(current.priority))

        due_at = current.due_at
        if changes.due_date.present:
            due_at = due_timestamp(changes.due_date.value)  # type: ignore[arg-type]

        candidate = dataclasses.replace(
            current,
            description=description,
            priority=priority,
            completed=bool(changes.completed.or_else(current.completed)),
            due_at=due_at,
        )
        self._tasks[idx] = candidate
        logger.debug("Task updated id=%s", task_id)
        return candidate

    def mark_completed(self, task_id: int) -> Task:
        return self.update(task_id, TaskUpdate.of(completed=True))

    def delete(self, task_id: int) -> Task:
        idx = self._index_of(task_id)
        task = self._tasks.pop(idx)
        logger.debug("Task deleted id=%s", task_id)
        return task

    def sort_by_priority(self, ascending: bool = True) -> None:
        # list.sort is stable in both directions, equal ranks keep their order.
        self._tasks.sort(key=lambda t: t.priority, reverse=not ascending)

    def sort_by_due_date(self, ascending: bool = True) -> None:
        self._tasks.sort(key=lambda t: t.due_at, reverse=not ascending)

    # ---- queries ----

    def get(self, task_id: int) -> Task:
        return self._tasks[self._index_of(task_id)]

    def list_tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def filter_by_status(self, completed: bool) -> tuple[Task, ...]:
        return tuple(t for t in self._tasks if t.completed == completed)

    def completion_percentage(self) -> float:
        if not self._tasks:
            return 0.0
        done = sum(1 for t in self._tasks if t.completed)
        return 100.0 * done / len(self._tasks)
