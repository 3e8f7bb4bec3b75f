# src/todo_manager/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import IntEnum
from typing import Any, Generic, TypeVar

from .errors import ValidationError

T = TypeVar("T")

# Due dates are pinned to local noon so DST shifts never move them across a day boundary.
DUE_HOUR = 12


class Priority(IntEnum):
    """
    Five urgency ranks.

    The integer value is the rank written to the task file (1 = most urgent).
    """

    HIGHEST = 1
    HIGH = 2
    MEDIUM = 3
    LOW = 4
    LOWEST = 5

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_rank(cls, rank: Any) -> Priority:
        if isinstance(rank, cls):
            return rank
        if isinstance(rank, bool) or not isinstance(rank, int):
            raise ValidationError("Priority must be between 1 and 5.")
        try:
            return cls(rank)
        except ValueError:
            raise ValidationError("Priority must be between 1 and 5.") from None


def validate_task(description: str, priority: Any) -> Priority:
    """
    Check the description/priority pair shared by add, update, load and save.

    Returns the coerced Priority; raises ValidationError otherwise.
    """
    if not description:
        raise ValidationError("Description cannot be empty.")
    return Priority.from_rank(priority)


def due_timestamp(day: date) -> int:
    """Epoch seconds for `day` at local noon."""
    return int(datetime(day.year, day.month, day.day, DUE_HOUR).timestamp())


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    description: str
    priority: Priority
    due_at: int
    completed: bool = False

    @property
    def due_date(self) -> date:
        return datetime.fromtimestamp(self.due_at).date()


@dataclass(frozen=True, slots=True)
class TaskDraft:
    """A validated record that has not been given an id yet (one parsed file line)."""

    description: str
    priority: Priority
    due_at: int
    completed: bool = False


@dataclass(frozen=True, slots=True)
class FieldUpdate(Generic[T]):
    """
    One optional field of a partial update.

    `present` tells "set to value" apart from "leave alone", so None or ""
    can still be meaningful values.
    """

    present: bool = False
    value: T | None = None

    @classmethod
    def set(cls, value: T) -> FieldUpdate[T]:
        return cls(present=True, value=value)

    def or_else(self, current: T) -> T:
        return self.value if self.present else current  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class TaskUpdate:
    description: FieldUpdate[str] = field(default_factory=FieldUpdate)
    priority: FieldUpdate[Priority | int] = field(default_factory=FieldUpdate)
    completed: FieldUpdate[bool] = field(default_factory=FieldUpdate)
    due_date: FieldUpdate[date] = field(default_factory=FieldUpdate)

    @classmethod
    def of(cls, **fields: Any) -> TaskUpdate:
        """TaskUpdate.of(description="x") marks exactly the given keywords as present."""
        unknown = set(fields) - {"description", "priority", "completed", "due_date"}
        if unknown:
            raise TypeError(f"Unknown task fields: {', '.join(sorted(unknown))}")
        return cls(**{name: FieldUpdate.set(value) for name, value in fields.items()})

    def is_empty(self) -> bool:
        return not (
            self.description.present
            or self.priority.present
            or self.completed.present
            or self.due_date.present
        )
