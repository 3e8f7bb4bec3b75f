# tests/test_commands.py

from __future__ import annotations

from datetime import date

from todo_manager.cli.commands import CommandRegistry, registry
from todo_manager.core.state import AppState
from todo_manager.tasks.task_models import Priority

from .fakes import CapturedOutput, ScriptedInput


def run(state: AppState, choice: str, answers: list[str]) -> tuple[str, CapturedOutput]:
    out = CapturedOutput()
    reply = registry.handle(state, choice, ask=ScriptedInput(answers), emit=out)
    return reply, out


def test_command_registry_routes_keys_and_aliases(state: AppState) -> None:
    reg = CommandRegistry()
    called: list[str] = []

    def handler(state, ask, emit):
        called.append(ask("q? "))
        return "ok"

    reg.register("1", handler, "Do it", aliases=["Do"])

    assert reg.handle(state, " 1 ", ask=ScriptedInput(["a"]), emit=print) == "ok"
    assert reg.handle(state, "DO", ask=ScriptedInput(["b"]), emit=print) == "ok"
    assert called == ["a", "b"]
    assert "Invalid menu choice" in reg.handle(state, "7")


def test_build_menu_lists_every_entry() -> None:
    menu = registry.build_menu()
    lines = menu.splitlines()

    assert "TO-DO LIST MANAGER" in lines[0]
    assert "1. Add Task" in lines
    assert "10. Save Tasks" in lines
    assert lines[-2] == "0. Exit"
    assert set(lines[-1]) == {"="}


def test_add(state: AppState) -> None:
    reply, _ = run(state, "1", ["Buy milk", "3", "2030 1 15"])

    assert reply == "Task added successfully (ID 1)."
    (task,) = state.task_store.list_tasks()
    assert task.description == "Buy milk"
    assert task.priority is Priority.MEDIUM
    assert task.due_date == date(2030, 1, 15)


def test_add_empty_description_is_rejected(state: AppState) -> None:
    reply, _ = run(state, "add", ["   ", "1", "2030 1 15"])

    assert reply.startswith("Error: Description cannot be empty")
    assert len(state.task_store) == 0


def test_edit_updates_selected_fields(state: AppState) -> None:
    state.task_store.add("Old", Priority.LOW, date(2030, 1, 1))

    reply, _ = run(state, "2", ["1", "y", "New", "y", "1", "y", "1", "n"])

    assert reply == "Task 1 updated."
    task = state.task_store.get(1)
    assert (task.description, task.priority, task.completed) == ("New", Priority.HIGHEST, True)
    assert task.due_date == date(2030, 1, 1)


def test_edit_empty_description_changes_nothing(state: AppState) -> None:
    state.task_store.add("Keep me", Priority.LOW, date(2030, 1, 1))

    reply, _ = run(state, "2", ["1", "y", "", "y", "2", "n", "n"])

    assert reply.startswith("Update failed")
    task = state.task_store.get(1)
    assert (task.description, task.priority) == ("Keep me", Priority.LOW)


def test_edit_messages(state: AppState) -> None:
    assert run(state, "2", ["abc"])[0] == "Invalid ID."
    assert run(state, "2", ["5"])[0] == "Warning: No task found with ID 5."

    state.task_store.add("t", Priority.LOW, date(2030, 1, 1))
    assert run(state, "2", ["1", "n", "n", "n", "n"])[0] == "Nothing to update."
    assert run(state, "2", ["1", "n", "n", "y", "maybe"])[0] == "Invalid input for completion."


def test_delete_and_complete(state: AppState) -> None:
    state.task_store.add("a", Priority.LOW, date(2030, 1, 1))
    state.task_store.add("b", Priority.LOW, date(2030, 1, 1))

    assert run(state, "4", ["2"])[0] == "Task 2 marked as completed."
    assert state.task_store.get(2).completed is True

    assert run(state, "3", ["1"])[0] == "Task 1 deleted."
    assert run(state, "3", ["1"])[0] == "Warning: No task found with ID 1."
    assert run(state, "3", ["x"])[0] == "Invalid ID."
    assert len(state.task_store) == 1


def test_list(state: AppState) -> None:
    assert run(state, "5", [])[0] == "No tasks available."

    state.task_store.add("Buy milk", Priority.HIGH, date(2030, 1, 15))
    table = run(state, "5", [])[0].splitlines()

    assert table[0].split() == ["ID", "Description", "Priority", "Status", "Due", "Date"]
    assert table[1].split() == ["1", "Buy", "milk", "High", "Pending", "2030-01-15"]


def test_filter(state: AppState) -> None:
    assert run(state, "6", ["1"])[0] == "No tasks available."

    state.task_store.add("open", Priority.LOW, date(2030, 1, 1))
    reply, out = run(state, "6", ["1"])
    assert reply == "No tasks found with status: Completed"
    assert "1. Completed" in out.text

    pending = run(state, "6", ["2"])[0]
    assert "open" in pending
    assert run(state, "6", ["3"])[0] == "Invalid choice."


def test_sorts(state: AppState) -> None:
    state.task_store.add("late low", Priority.LOW, date(2030, 5, 1))
    state.task_store.add("soon high", Priority.HIGH, date(2030, 1, 1))

    assert run(state, "7", ["1"])[0] == "Tasks sorted by priority (ascending)."
    assert [t.id for t in state.task_store.list_tasks()] == [2, 1]

    assert run(state, "8", ["2"])[0] == "Tasks sorted by due date (descending)."
    assert [t.id for t in state.task_store.list_tasks()] == [1, 2]

    assert run(state, "8", ["x"])[0] == "Invalid choice."


def test_percentage(state: AppState) -> None:
    assert run(state, "9", [])[0] == "No tasks. Completion percentage: 0%"

    for name in "abc":
        state.task_store.add(name, Priority.LOW, date(2030, 1, 1))
    state.task_store.mark_completed(1)

    assert run(state, "9", [])[0] == "Completion Percentage: 33.33%"


def test_save(state: AppState) -> None:
    state.task_store.add("Buy milk", Priority.HIGH, date(2030, 1, 15))

    reply, _ = run(state, "10", [])

    assert reply == f"Tasks saved to {state.tasks_path} (1 task(s))."
    assert state.tasks_path.read_text(encoding="utf-8").startswith("Buy milk|2 0 ")


def test_save_failure_is_reported(state: AppState, tmp_path) -> None:
    state.tasks_path = tmp_path
    assert run(state, "save", [])[0] == "Error: Unable to open file for saving."
