# src/todo_manager/cli/prompts.py

"""
Raw input parsing for the menu.

The task store only accepts checked values (ints, Priority, date); turning
operator text into those values, and re-asking on bad input, happens here.
Every prompt takes an `ask` callable (input() by default) so tests can feed
scripted answers.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

from ..tasks.task_models import Priority, due_timestamp

Ask = Callable[[str], str]

PRIORITY_PROMPT = "Enter priority (1=Highest, 2=High, 3=Medium, 4=Low, 5=Lowest): "
DUE_DATE_PROMPT = "Enter due date (YYYY MM DD): "


def parse_int(raw: str) -> int | None:
    raw = raw.strip()
    try:
        return int(raw)
    except ValueError:
        return None


def parse_priority(raw: str) -> Priority | None:
    value = parse_int(raw)
    if value is None or not 1 <= value <= 5:
        return None
    return Priority(value)


def parse_due_date(raw: str) -> date | None:
    """Parse 'YYYY MM DD'; None unless it names a real calendar day."""
    parts = raw.split()
    if len(parts) != 3:
        return None
    nums = [parse_int(p) for p in parts]
    if any(n is None for n in nums):
        return None
    year, month, day = nums
    try:
        day_ = date(year, month, day)  # type: ignore[arg-type]
        due_timestamp(day_)
    except (ValueError, OverflowError, OSError):
        return None
    return day_


def ask_priority(ask: Ask = input, *, emit: Callable[[str], None] = print) -> Priority:
    while True:
        prio = parse_priority(ask(PRIORITY_PROMPT))
        if prio is not None:
            return prio
        emit("Invalid priority. Must be 1 to 5.")


def ask_due_date(ask: Ask = input, *, emit: Callable[[str], None] = print) -> date:
    while True:
        due = parse_due_date(ask(DUE_DATE_PROMPT))
        if due is not None:
            return due
        emit("Invalid date. Please enter a real date as YYYY MM DD.")


def ask_yes_no(prompt: str, ask: Ask = input) -> bool:
    return ask(f"{prompt} (y/n): ").strip().lower() in ("y", "yes")
