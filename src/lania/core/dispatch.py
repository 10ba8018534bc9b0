# src/lania/core/dispatch.py

from __future__ import annotations

"""
Command dispatch.

One function maps a ParsedCommand to a task list operation, a persistence
trigger and a result message. Every mutation is written through right away;
a failed write is reported but the in-memory change stays (the list in
memory is the source of truth for the rest of the session).
"""

import logging
from dataclasses import dataclass
from enum import StrEnum

from ..tasks.task_list import TaskList
from ..tasks.task_models import Task
from ..tasks.task_store import TaskStore
from . import messages
from .errors import PersistenceError, UnknownCommandError
from .parser import (
    AddDeadlineCommand,
    AddEventCommand,
    AddTodoCommand,
    CompleteCommand,
    DeleteCommand,
    ExitCommand,
    FindCommand,
    ListCommand,
    ParsedCommand,
    UnknownCommand,
)

logger = logging.getLogger(__name__)


class SessionState(StrEnum):
    RUNNING = "running"
    EXITED = "exited"


@dataclass(slots=True, frozen=True)
class Outcome:
    message: str
    state: SessionState = SessionState.RUNNING


def _persist(tasks: TaskList, store: TaskStore, message: str) -> str:
    try:
        store.save(tasks)
    except PersistenceError as e:
        logger.error("Persist failed, keeping in-memory state: %s", e)
        return f"{message}\n{messages.save_failed(e)}"
    return message


def _build_task(command: ParsedCommand) -> Task:
    if isinstance(command, AddTodoCommand):
        return Task.todo(command.description)
    if isinstance(command, AddDeadlineCommand):
        return Task.deadline(command.description, command.by)
    if isinstance(command, AddEventCommand):
        return Task.event(command.description, command.at)
    raise TypeError(f"not an add command: {command!r}")


def dispatch(command: ParsedCommand, tasks: TaskList, store: TaskStore) -> Outcome:
    """
    Apply one command.

    Raises LaniaError subclasses (index/date/unknown) for the session to
    report; a PersistenceError never escapes, it is folded into the message.
    """
    if isinstance(command, ListCommand):
        return Outcome(messages.task_list(tasks))

    if isinstance(command, FindCommand):
        return Outcome(messages.found(tasks.matches(command.keyword), command.keyword))

    if isinstance(command, CompleteCommand):
        task = tasks.complete(command.index)
        logger.debug("Completed task %d", command.index)
        return Outcome(_persist(tasks, store, messages.completed(task)))

    if isinstance(command, DeleteCommand):
        task = tasks.remove(command.index)
        logger.debug("Removed task %d", command.index)
        return Outcome(_persist(tasks, store, messages.removed(tasks, task)))

    if isinstance(command, (AddTodoCommand, AddDeadlineCommand, AddEventCommand)):
        # Build first: a bad date must not leave a half-added task behind.
        task = _build_task(command)
        tasks.add(task)
        logger.debug("Added %s task", task.kind.label)
        return Outcome(_persist(tasks, store, messages.added(tasks, task)))

    if isinstance(command, ExitCommand):
        return Outcome(messages.goodbye(), SessionState.EXITED)

    if isinstance(command, UnknownCommand):
        raise UnknownCommandError(command.word)

    raise TypeError(f"unsupported command: {command!r}")
