# tests/test_bootstrap.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from lania.cli.bootstrap import create_initial_session
from lania.config import Settings


def test_session_round_trips_through_the_task_file(settings: SimpleNamespace) -> None:
    first = create_initial_session(settings=settings)
    first.handle("todo read book")
    first.handle("event book club /at 25-08-2021 19:30")
    first.handle("done 2")
    first.handle("bye")

    assert settings.tasks_path.read_text("utf-8") == (
        "T | 0 | read book\nE | 1 | book club | 25-08-2021 19:30\n"
    )

    second = create_initial_session(settings=settings)
    assert second.handle("list").text == (
        "Here are the tasks in your list:\n"
        "1.[T][ ] read book\n"
        "2.[E][x] book club (at: Aug 25 2021 7:30PM)"
    )


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LANIA_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("LANIA_MATRIX_ENABLED", "yes")
    monkeypatch.setenv("LANIA_MATRIX_ROOMS", "!a:x, !b:x")
    monkeypatch.delenv("LANIA_TASKS_PATH", raising=False)
    monkeypatch.delenv("LANIA_LOG_DIR", raising=False)

    s = Settings.from_env()

    assert s.tasks_path == tmp_path / "lania.txt"
    assert s.log_dir == tmp_path
    assert s.matrix_enabled is True
    assert s.matrix_rooms == ["!a:x", "!b:x"]


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LANIA_APP_NAME", "LANIA_DATA_DIR", "LANIA_TASKS_PATH", "LANIA_CONSOLE_ENABLED", "LANIA_MATRIX_ENABLED"):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()

    assert s.app_name == "Lania"
    assert s.tasks_path == Path("data") / "lania.txt"
    assert s.console_enabled is True
    assert s.matrix_enabled is False


@pytest.mark.parametrize("line", ["todo buy\nmilk", "todo buy\u2028milk", "todo buy\x85milk"])
def test_line_breaks_in_descriptions_survive_reload(settings: SimpleNamespace, line: str) -> None:
    first = create_initial_session(settings=settings)
    first.handle(line)
    first.handle("todo call mum")

    assert settings.tasks_path.read_text("utf-8") == "T | 0 | buy milk\nT | 0 | call mum\n"

    second = create_initial_session(settings=settings)
    assert [t.description for t in second.tasks] == ["buy milk", "call mum"]
    assert "unreadable" not in second.greeting()
