# tests/test_task_store.py

from __future__ import annotations

from pathlib import Path

import pytest

from lania.core.errors import PersistenceError
from lania.tasks.task_list import TaskList
from lania.tasks.task_models import Task
from lania.tasks.task_store import TaskStore, TextFileStore

from .fakes import FakeLinesStore


def test_missing_file_loads_empty(tmp_path: Path) -> None:
    store = TaskStore(TextFileStore(tmp_path / "nope" / "lania.txt"))
    result = store.load()
    assert result.tasks.is_empty()
    assert result.corrupt == []


def test_save_then_load_from_disk(tmp_path: Path) -> None:
    path = tmp_path / "data" / "lania.txt"
    store = TaskStore(TextFileStore(path))

    tasks = TaskList([Task.todo("read book"), Task.event("book club", "25-08-2021 19:30")])
    tasks.complete(1)
    store.save(tasks)

    assert path.read_text("utf-8") == "T | 1 | read book\nE | 0 | book club | 25-08-2021 19:30\n"
    assert not path.with_name("lania.txt.tmp").exists()

    loaded = TaskStore(TextFileStore(path)).load().tasks
    assert [t.render() for t in loaded] == [t.render() for t in tasks]


def test_corrupt_lines_are_skipped_and_backed_up(tmp_path: Path) -> None:
    path = tmp_path / "lania.txt"
    path.write_text("T | 0 | keep me\nthis is not a task\nD | 0 | bad date | soon\nT | 1 | me too\n", "utf-8")

    result = TaskStore(TextFileStore(path)).load()

    assert [t.description for t in result.tasks] == ["keep me", "me too"]
    assert [e.line_no for e in result.corrupt] == [2, 3]
    assert result.backup_path == tmp_path / "lania.txt.corrupt"
    assert result.backup_path.read_text("utf-8") == path.read_text("utf-8")


def test_undecodable_file_is_persistence_error(tmp_path: Path) -> None:
    path = tmp_path / "lania.txt"
    path.write_bytes(b"T | 0 | caf\xe9\n")

    with pytest.raises(PersistenceError) as exc:
        TaskStore(TextFileStore(path)).load()
    assert "could not read the task file" in str(exc.value)


def test_only_newline_separates_records(tmp_path: Path) -> None:
    path = tmp_path / "lania.txt"
    path.write_text("T | 0 | a\x0cb\nT | 1 | c\u2028d\n", "utf-8")

    assert TextFileStore(path).read_lines() == ["T | 0 | a\x0cb", "T | 1 | c\u2028d"]
    result = TaskStore(TextFileStore(path)).load()
    assert [t.description for t in result.tasks] == ["a b", "c d"]
    assert result.corrupt == []


def test_corrupt_lines_without_backup_support() -> None:
    result = TaskStore(FakeLinesStore(["garbage"])).load()
    assert result.tasks.is_empty()
    assert len(result.corrupt) == 1
    assert result.backup_path is None


def test_read_failure_is_persistence_error() -> None:
    lines = FakeLinesStore()
    lines.fail_read = True
    with pytest.raises(PersistenceError):
        TaskStore(lines).load()


def test_write_failure_is_persistence_error() -> None:
    lines = FakeLinesStore()
    lines.fail_write = True
    with pytest.raises(PersistenceError) as exc:
        TaskStore(lines).save(TaskList([Task.todo("a")]))
    assert "disk full" in str(exc.value)
