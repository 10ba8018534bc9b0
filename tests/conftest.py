# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from lania.core.session import Session
from lania.tasks.task_store import TaskStore

from .fakes import FakeLinesStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and the connectors.

    We use a SimpleNamespace rather than the real config so tests never read
    the developer's environment or .env.
    """
    return SimpleNamespace(
        app_name="Lania",
        log_level="INFO",
        console_enabled=True,
        matrix_enabled=False,
        matrix_homeserver="",
        matrix_user_id="",
        matrix_password=None,
        matrix_rooms=[],
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "data" / "lania.txt",
        log_dir=tmp_path / "data",
        matrix_store_path=tmp_path / "data" / "matrix_store",
    )


@pytest.fixture()
def lines_store() -> FakeLinesStore:
    return FakeLinesStore()


@pytest.fixture()
def store(lines_store: FakeLinesStore) -> TaskStore:
    return TaskStore(lines_store)


@pytest.fixture()
def session(store: TaskStore) -> Session:
    """Session over an empty in-memory store."""
    return Session.start(store)
