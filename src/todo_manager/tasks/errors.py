# src/todo_manager/tasks/errors.py

from __future__ import annotations


class TaskError(Exception):
    """Base class for recoverable task subsystem errors."""


class ValidationError(TaskError, ValueError):
    """Empty description or a priority outside the five ranks."""


class NotFoundError(TaskError, LookupError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"No task found with ID {task_id}.")
        self.task_id = task_id


class MalformedLineError(TaskError, ValueError):
    """A task file line that does not follow the line format."""
