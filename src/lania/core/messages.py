# src/lania/core/messages.py

"""User-facing texts. Both front ends show these strings unchanged."""

from __future__ import annotations

from collections.abc import Iterable

from ..tasks.task_list import TaskList
from ..tasks.task_models import Task

INDENT = "  "


def _count(tasks: TaskList) -> str:
    n = len(tasks)
    return f"Now you have {n} task{'' if n == 1 else 's'} in the list."


def _numbered(pairs: Iterable[tuple[int, Task]]) -> list[str]:
    return [f"{i}.{task.render()}" for i, task in pairs]


def greeting(app_name: str = "Lania") -> str:
    return f"Hello! I'm {app_name}.\nWhat can {app_name} do for you?"


def goodbye() -> str:
    return "Bye. Hope to see you again soon!"


def task_list(tasks: TaskList) -> str:
    if tasks.is_empty():
        return "Your list is empty."
    return "\n".join(["Here are the tasks in your list:", *_numbered(enumerate(tasks, start=1))])


def found(matches: list[tuple[int, Task]], keyword: str) -> str:
    if not matches:
        return f"No tasks match {keyword!r}."
    return "\n".join(["Here are the matching tasks in your list:", *_numbered(matches)])


def added(tasks: TaskList, task: Task) -> str:
    return f"Got it. Lania has added this task:\n{INDENT}{task.render()}\n{_count(tasks)}"


def completed(task: Task) -> str:
    return f"Nice! Lania has marked this task as done:\n{INDENT}{task.render()}"


def removed(tasks: TaskList, task: Task) -> str:
    return f"Noted. Lania has removed this task:\n{INDENT}{task.render()}\n{_count(tasks)}"


def save_failed(error: Exception) -> str:
    return f"{error}\nYour change is kept for this session but may be lost when Lania closes."


def load_failed(error: Exception) -> str:
    return f"{error}\nLania is starting with an empty list."


def corrupt_records(count: int, backup: object | None) -> str:
    text = f"Lania skipped {count} unreadable line{'' if count == 1 else 's'} in the task file."
    if backup:
        text += f"\nThe original file was copied to {backup}."
    return text


def internal_error() -> str:
    return "Internal error while handling that command."
