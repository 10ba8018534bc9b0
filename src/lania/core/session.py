# src/lania/core/session.py

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field

from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore
from . import messages
from .dispatch import SessionState, dispatch
from .errors import LaniaError, PersistenceError
from .parser import parse

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class Reply:
    text: str
    exit: bool = False


@dataclass
class Session:
    """
    Everything one conversation with Lania owns: the task list, the store it
    is mirrored to, and the running/exited state.

    Front ends call handle() once per input line. The lock keeps two front
    ends (console + Matrix) from interleaving commands.
    """

    tasks: TaskList
    store: TaskStore
    app_name: str = "Lania"
    state: SessionState = SessionState.RUNNING
    notices: list[str] = field(default_factory=list)
    lock: threading.RLock = field(default_factory=threading.RLock)

    @classmethod
    def start(cls, store: TaskStore, *, app_name: str = "Lania") -> Session:
        """
        Load persisted tasks and build a session.

        A load failure never aborts startup: the session begins empty and the
        problem is kept in `notices` for the front end to show.
        """
        notices: list[str] = []
        try:
            result = store.load()
        except PersistenceError as e:
            logger.error("Failed to load tasks: %s", e)
            notices.append(messages.load_failed(e))
            tasks = TaskList()
        else:
            tasks = result.tasks
            if result.corrupt:
                notices.append(messages.corrupt_records(len(result.corrupt), result.backup_path))
        return cls(tasks=tasks, store=store, app_name=app_name, notices=notices)

    @property
    def exited(self) -> bool:
        return self.state is SessionState.EXITED

    def greeting(self) -> str:
        parts = [*self.notices, messages.task_list(self.tasks), messages.greeting(self.app_name)]
        return "\n".join(parts)

    def handle(self, line: str) -> Reply:
        with self.lock:
            if self.exited:
                return Reply(messages.goodbye(), exit=True)

            try:
                command = parse(line)
                outcome = dispatch(command, self.tasks, self.store)
            except LaniaError as e:
                # User-facing already; keep INFO logs free of chat text.
                logger.debug("Command rejected (%s): %s", type(e).__name__, e)
                return Reply(str(e))

            self.state = outcome.state
            if self.exited:
                logger.info("Session exited.")
            return Reply(outcome.message, exit=self.exited)
