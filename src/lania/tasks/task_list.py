# src/lania/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..core.errors import IndexOutOfRangeError
from .task_models import Task


class TaskList:
    """
    Ordered task collection owned by a session.

    Insertion order is display order and file order. All public indices are
    1-based; the list is never shared across threads without the session lock.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"TaskList({self._tasks!r})"

    def is_empty(self) -> bool:
        return not self._tasks

    def _check(self, index: int, command: str) -> int:
        if index < 1 or index > len(self._tasks):
            raise IndexOutOfRangeError(index, len(self._tasks), command)
        return index - 1

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def complete(self, index: int) -> Task:
        task = self._tasks[self._check(index, "done")]
        task.mark_complete()
        return task

    def remove(self, index: int) -> Task:
        # Later tasks shift down by one, like any list removal.
        return self._tasks.pop(self._check(index, "delete"))

    def matches(self, keyword: str) -> list[tuple[int, Task]]:
        """Case-sensitive substring matches as (1-based position, task) pairs."""
        return [(i, t) for i, t in enumerate(self._tasks, start=1) if keyword in t.description]

    def find(self, keyword: str) -> TaskList:
        return TaskList(t for _, t in self.matches(keyword))
