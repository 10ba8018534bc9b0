# src/lania/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the file store into a Session and loads persisted tasks.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..core.session import Session
from ..tasks.task_store import TaskStore, TextFileStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings: Settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_session(*, settings: Settings | None = None) -> Session:
    """
    Create a Session from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden
    global config reads. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    try:
        _ensure_local_dirs(settings)
    except OSError:
        # Startup continues; the first save will report the problem.
        logger.exception("Failed to create data directories.")

    store = TaskStore(TextFileStore(settings.tasks_path))
    session = Session.start(store, app_name=settings.app_name)
    logger.info("Session ready path=%s tasks=%d", settings.tasks_path, len(session.tasks))
    return session
