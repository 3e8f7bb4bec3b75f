# src/todo_manager/cli/commands.py

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..core.state import AppState
from ..tasks.errors import NotFoundError, ValidationError
from ..tasks.task_codec import save_tasks
from ..tasks.task_models import TaskUpdate
from .prompts import Ask, ask_due_date, ask_priority, ask_yes_no, parse_int
from .render import format_percentage, format_task_table, status_label

CommandEmitter = Callable[[str], None]
CommandHandler = Callable[[AppState, Ask, CommandEmitter], str]


EXIT_KEY = "0"
MENU_TITLE = "TO-DO LIST MANAGER"
MENU_RULE = "=" * 40


class CommandRegistry:
    """Numbered menu registry used by the console connector (1 = add, 2 = edit, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        key: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = key.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        choice: str,
        ask: Ask = input,
        emit: CommandEmitter = print,
    ) -> str:
        """Run the handler for a menu choice and return the text to show."""
        name = choice.strip().lower()
        handler = self._handlers.get(name)
        if handler is None:
            return "Invalid menu choice. Please try again."
        return handler(state, ask, emit)

    def build_menu(self) -> str:
        lines = [f"{' ' + MENU_TITLE + ' ':=^{len(MENU_RULE)}}"]
        for key, help_text in self._help.items():
            lines.append(f"{key}. {help_text}")
        lines.append(f"{EXIT_KEY}. Exit")
        lines.append(MENU_RULE)
        return "\n".join(lines)


registry = CommandRegistry()


def _ask_task_id(ask: Ask, prompt: str) -> int | None:
    return parse_int(ask(prompt))


def _ask_direction(ask: Ask, emit: CommandEmitter, title: str) -> bool | None:
    """1 -> ascending (True), 2 -> descending (False), anything else -> None."""
    emit(f"{title}:\n1. Ascending\n2. Descending")
    choice = parse_int(ask("Enter your choice: "))
    if choice == 1:
        return True
    if choice == 2:
        return False
    return None


def cmd_add(state: AppState, ask: Ask, emit: CommandEmitter) -> str:
    description = ask("Enter task description: ").strip()
    priority = ask_priority(ask, emit=emit)
    due = ask_due_date(ask, emit=emit)
    try:
        task = state.task_store.add(description, priority, due)
    except ValidationError as e:
        return f"Error: {e}"
    return f"Task added successfully (ID {task.id})."


def cmd_edit(state: AppState, ask: Ask, emit: CommandEmitter) -> str:
    task_id = _ask_task_id(ask, "Enter task ID to edit: ")
    if task_id is None:
        return "Invalid ID."
    try:
        state.task_store.get(task_id)
    except NotFoundError as e:
        return f"Warning: {e}"

    fields: dict[str, Any] = {}
    if ask_yes_no("Update description?", ask):
        fields["description"] = ask("New description: ").strip()
    if ask_yes_no("Update priority?", ask):
        fields["priority"] = ask_priority(ask, emit=emit)
    if ask_yes_no("Update completion status?", ask):
        value = parse_int(ask("Mark as completed? (1=Yes, 0=No): "))
        if value is None:
            return "Invalid input for completion."
        fields["completed"] = value != 0
    if ask_yes_no("Update due date?", ask):
        fields["due_date"] = ask_due_date(ask, emit=emit)

    if not fields:
        return "Nothing to update."

    try:
        state.task_store.update(task_id, TaskUpdate.of(**fields))
    except ValidationError as e:
        return f"Update failed: {e}"
    except NotFoundError as e:
        return f"Warning: {e}"
    return f"Task {task_id} updated."


def cmd_delete(state: AppState, ask: Ask, emit: CommandEmitter) -> str:
    task_id = _ask_task_id(ask, "Enter task ID to delete: ")
    if task_id is None:
        return "Invalid ID."
    try:
        state.task_store.delete(task_id)
    except NotFoundError as e:
        return f"Warning: {e}"
    return f"Task {task_id} deleted."


def cmd_complete(state: AppState, ask: Ask, emit: CommandEmitter) -> str:
    task_id = _ask_task_id(ask, "Enter task ID to mark as completed: ")
    if task_id is None:
        return "Invalid ID."
    try:
        state.task_store.mark_completed(task_id)
    except NotFoundError as e:
        return f"Warning: {e}"
    return f"Task {task_id} marked as completed."


def cmd_list(state: AppState, ask: Ask, emit: CommandEmitter) -> str:
    tasks = state.task_store.list_tasks()
    if not tasks:
        return "No tasks available."
    return format_task_table(tasks)


def cmd_filter(state: AppState, ask: Ask, emit: CommandEmitter) -> str:
    emit("Filter tasks by status:\n1. Completed\n2. Pending")
    choice = parse_int(ask("Enter your choice: "))
    if choice not in (1, 2):
        return "Invalid choice."
    completed = choice == 1

    tasks = state.task_store.filter_by_status(completed)
    if tasks:
        return format_task_table(tasks)
    # An empty result means different things for an empty and a non-empty list.
    if len(state.task_store) == 0:
        return "No tasks available."
    return f"No tasks found with status: {status_label(completed)}"


def cmd_sort_priority(state: AppState, ask: Ask, emit: CommandEmitter) -> str:
    ascending = _ask_direction(ask, emit, "Sort by priority")
    if ascending is None:
        return "Invalid choice."
    state.task_store.sort_by_priority(ascending)
    return f"Tasks sorted by priority ({'ascending' if ascending else 'descending'})."


def cmd_sort_due(state: AppState, ask: Ask, emit: CommandEmitter) -> str:
    ascending = _ask_direction(ask, emit, "Sort by due date")
    if ascending is None:
        return "Invalid choice."
    state.task_store.sort_by_due_date(ascending)
    return f"Tasks sorted by due date ({'ascending' if ascending else 'descending'})."


def cmd_percentage(state: AppState, ask: Ask, emit: CommandEmitter) -> str:
    if len(state.task_store) == 0:
        return "No tasks. Completion percentage: 0%"
    return f"Completion Percentage: {format_percentage(state.task_store.completion_percentage())}"


def cmd_save(state: AppState, ask: Ask, emit: CommandEmitter) -> str:
    try:
        written = save_tasks(state.task_store, state.tasks_path)
    except OSError:
        return "Error: Unable to open file for saving."
    return f"Tasks saved to {state.tasks_path} ({written} task(s))."


registry.register("1", cmd_add, help_text="Add Task", aliases=["add"])
registry.register("2", cmd_edit, help_text="Edit Task", aliases=["edit"])
registry.register("3", cmd_delete, help_text="Delete Task", aliases=["delete", "rm"])
registry.register("4", cmd_complete, help_text="Mark Task as Completed", aliases=["done"])
registry.register("5", cmd_list, help_text="Display All Tasks", aliases=["list", "ls"])
registry.register("6", cmd_filter, help_text="Filter by Status (Completed/Pending)", aliases=["filter"])
registry.register("7", cmd_sort_priority, help_text="Sort Tasks by Priority")
registry.register("8", cmd_sort_due, help_text="Sort Tasks by Due Date")
registry.register("9", cmd_percentage, help_text="Display Completion Percentage", aliases=["stats"])
registry.register("10", cmd_save, help_text="Save Tasks", aliases=["save"])
