# tests/test_console_connector.py

from __future__ import annotations

import builtins
from collections.abc import Iterator

import pytest

from lania.connectors.console_connector import run_console_loop
from lania.core.session import Session

from .fakes import FakeLinesStore


def _feed(monkeypatch: pytest.MonkeyPatch, lines: list[str]) -> Iterator[str]:
    it = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)
    return it


def test_console_runs_until_bye(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    session: Session,
    lines_store: FakeLinesStore,
) -> None:
    rest = _feed(monkeypatch, ["todo read book", "", "nonsense", "bye", "todo never read"])

    run_console_loop(session)

    out = capsys.readouterr().out
    assert "Your list is empty." in out
    assert "What can Lania do for you?" in out
    assert "Got it. Lania has added this task:" in out
    assert "Sorry, but Lania does not know what that means." in out
    assert "Bye. Hope to see you again soon!" in out
    # The loop stopped at `bye`.
    assert next(rest) == "todo never read"
    assert lines_store.lines == ["T | 0 | read book"]


def test_console_stops_on_eof(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    session: Session,
) -> None:
    _feed(monkeypatch, ["list"])
    run_console_loop(session)
    assert not session.exited
    assert capsys.readouterr().out.count("Your list is empty.") == 2


def test_console_survives_handler_crash(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    session: Session,
) -> None:
    def boom(line: str):
        raise RuntimeError("boom")

    monkeypatch.setattr(session, "handle", boom)
    _feed(monkeypatch, ["list"])

    run_console_loop(session)
    assert "Internal error while handling that command." in capsys.readouterr().out
