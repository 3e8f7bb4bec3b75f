# src/todo_manager/tasks/task_codec.py

"""
Line-oriented task file.

One task per line:

    <description>|<priority rank> <completed 0/1> <due date as epoch seconds>

e.g. ``Water the plants|3 0 1700000000``.

Known limitation: the description is read up to the first '|', so a
description that itself contains '|' cannot be read back. Such a line is
reported and skipped on load.

A description holding a line break would be split across two lines, so
save_tasks leaves such a record out and logs it. A line that is not valid
UTF-8 is skipped on load like any other malformed line.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import MalformedLineError, TaskError, ValidationError
from .task_models import Task, TaskDraft, validate_task
from .task_store import TaskStore

logger = logging.getLogger(__name__)

DELIMITER = "|"
ENCODING = "utf-8"
LINE_BREAKS = ("\n", "\r")


def format_line(task: Task) -> str:
    return (
        f"{task.description}{DELIMITER}"
        f"{int(task.priority)} {int(task.completed)} {int(task.due_at)}"
    )


def parse_line(line: str) -> TaskDraft:
    description, sep, trailer = line.rstrip("\r\n").partition(DELIMITER)
    if not sep:
        raise MalformedLineError(f"missing '{DELIMITER}' delimiter")

    parts = trailer.split()
    if len(parts) != 3:
        raise MalformedLineError(f"expected 3 numeric fields, got {len(parts)}")
    try:
        rank, completed, due_at = (int(p) for p in parts)
    except ValueError:
        raise MalformedLineError(f"non-numeric field in {trailer.strip()!r}") from None

    if not description:
        raise ValidationError("Description cannot be empty.")
    if not 1 <= rank <= 5:
        raise ValidationError(f"Priority must be between 1 and 5 (got {rank}).")

    return TaskDraft(
        description=description,
        priority=validate_task(description, rank),
        due_at=due_at,
        completed=completed != 0,
    )


def _decode_line(raw: bytes) -> str:
    try:
        return raw.decode(ENCODING)
    except UnicodeDecodeError as e:
        raise MalformedLineError(f"not valid {ENCODING} at byte {e.start}") from None


def load_tasks(store: TaskStore, path: str | Path) -> int:
    """
    Replace the store's collection with the tasks in `path`.

    - missing file: empty collection, nothing reported
    - bad line: warning, line skipped, loading continues
    - unreadable file: OSError propagates and the store is left as it was

    Task ids are not stored in the file; they follow line order from 1.
    """
    path = Path(path)
    if not path.exists():
        store.replace_all([])
        return 0

    raw_lines = path.read_bytes().splitlines()

    drafts: list[TaskDraft] = []
    for lineno, raw in enumerate(raw_lines, start=1):
        if not raw.strip():
            continue
        try:
            drafts.append(parse_line(_decode_line(raw)))
        except TaskError as e:
            logger.warning("Skipping invalid task from file %s line %d: %s", path, lineno, e)

    total = store.replace_all(drafts)
    logger.info("Loaded %d task(s) from %s", total, path)
    return total


def save_tasks(store: TaskStore, path: str | Path) -> int:
    """
    Overwrite `path` with the store's tasks (plain truncate-and-write).

    Records that fail validation here are logged and left out. Returns the
    number of lines written.
    """
    path = Path(path)
    try:
        fh = path.open("w", encoding=ENCODING)
    except OSError:
        logger.error("Unable to open %s for saving.", path)
        raise

    written = 0
    with fh:
        for task in store.list_tasks():
            try:
                validate_task(task.description, task.priority)
            except ValidationError as e:
                logger.error("Invalid task with ID %s not saved: %s", task.id, e)
                continue
            if any(ch in task.description for ch in LINE_BREAKS):
                logger.error("Task with ID %s not saved: description contains a line break.", task.id)
                continue
            fh.write(format_line(task) + "\n")
            written += 1

    logger.info("Saved %d task(s) to %s", written, path)
    return written
