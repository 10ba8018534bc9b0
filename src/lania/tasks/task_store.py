# src/lania/tasks/task_store.py

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from ..core.errors import CorruptRecordError, PersistenceError
from ..core.ports import LinesStore
from . import task_codec
from .task_list import TaskList

logger = logging.getLogger(__name__)


class TextFileStore:
    """
    Plain-text file behind the task list.

    - missing file -> no lines (first run is not an error)
    - writes are whole-file rewrites through a temp file + os.replace
    """

    def __init__(self, path: str | Path = "data/lania.txt") -> None:
        self._path = Path(path)

    def read_lines(self) -> list[str]:
        if not self._path.exists():
            return []
        text = self._path.read_text("utf-8")
        # Only "\n" ends a record; str.splitlines would also break on \x0c, \u2028 etc.
        if text.endswith("\n"):
            text = text[:-1]
        return text.split("\n") if text else []

    def write_lines(self, lines: list[str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text("".join(f"{line}\n" for line in lines), "utf-8")
        os.replace(tmp, self._path)

    def backup(self, suffix: str = ".corrupt") -> Path | None:
        """Copy the current file aside (best-effort). Returns the copy's path."""
        if not self._path.exists():
            return None
        target = self._path.with_name(self._path.name + suffix)
        shutil.copyfile(self._path, target)
        return target


@dataclass(slots=True)
class LoadResult:
    tasks: TaskList
    corrupt: list[CorruptRecordError] = field(default_factory=list)
    backup_path: Path | None = None


class TaskStore:
    """
    Task list <-> lines store, via the codec.

    Corrupt lines on load are skipped (and logged); the rest of the file still
    loads. Before the session gets a chance to rewrite the file, the original
    is copied aside when the lines store supports it.
    """

    def __init__(self, lines: LinesStore) -> None:
        self._lines = lines

    def load(self) -> LoadResult:
        try:
            raw_lines = self._lines.read_lines()
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Lania could not read the task file: {e}") from e

        result = LoadResult(tasks=TaskList())
        for line_no, line in enumerate(raw_lines, start=1):
            if not line.strip():
                continue
            try:
                result.tasks.add(task_codec.decode_record(line, line_no))
            except CorruptRecordError as e:
                logger.warning("Skipping corrupt task record: %s", e)
                result.corrupt.append(e)

        if result.corrupt:
            backup = getattr(self._lines, "backup", None)
            if callable(backup):
                try:
                    result.backup_path = backup()
                except OSError:
                    logger.exception("Failed to back up the corrupt task file.")
                else:
                    logger.info("Original task file copied to %s", result.backup_path)

        logger.info("TaskStore loaded tasks=%d corrupt=%d", len(result.tasks), len(result.corrupt))
        return result

    def save(self, tasks: TaskList) -> None:
        lines = task_codec.encode(tasks)
        try:
            self._lines.write_lines(lines)
        except OSError as e:
            raise PersistenceError(f"Lania could not save your tasks: {e}") from e
        logger.debug("TaskStore saved tasks=%d", len(lines))

