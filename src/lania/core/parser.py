# src/lania/core/parser.py

"""
Command parser.

Turns one raw input line into a ParsedCommand. Pure: never touches the task
list or the store. The first whitespace-delimited word (case-sensitive) picks
the command; the rest of the line is the payload.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import EmptyArgumentError, InvalidIndexError

DEADLINE_MARKER = "/by"
EVENT_MARKER = "/at"


@dataclass(frozen=True, slots=True)
class ListCommand:
    pass


@dataclass(frozen=True, slots=True)
class FindCommand:
    keyword: str


@dataclass(frozen=True, slots=True)
class CompleteCommand:
    index: int


@dataclass(frozen=True, slots=True)
class DeleteCommand:
    index: int


@dataclass(frozen=True, slots=True)
class AddTodoCommand:
    description: str


@dataclass(frozen=True, slots=True)
class AddDeadlineCommand:
    description: str
    by: str


@dataclass(frozen=True, slots=True)
class AddEventCommand:
    description: str
    at: str


@dataclass(frozen=True, slots=True)
class ExitCommand:
    pass


@dataclass(frozen=True, slots=True)
class UnknownCommand:
    word: str


ParsedCommand = (
    ListCommand
    | FindCommand
    | CompleteCommand
    | DeleteCommand
    | AddTodoCommand
    | AddDeadlineCommand
    | AddEventCommand
    | ExitCommand
    | UnknownCommand
)


def _split(line: str) -> tuple[str, str]:
    parts = (line or "").strip().split(maxsplit=1)
    if not parts:
        return "", ""
    word = parts[0]
    payload = parts[1].strip() if len(parts) > 1 else ""
    return word, payload


def parse_command_word(line: str) -> str:
    return _split(line)[0]


def parse_task_description(line: str) -> str:
    """
    Everything after the command word, trimmed.

    "todo read book" -> "read book"; "todo" -> EmptyArgumentError("todo").
    """
    word, payload = _split(line)
    if not payload:
        raise EmptyArgumentError(word or "the command")
    return payload


def parse_index(line: str) -> int:
    word, payload = _split(line)
    # isdigit alone would accept non-ASCII digits int() cannot handle.
    if not (payload.isascii() and payload.isdigit()):
        raise InvalidIndexError(word)
    index = int(payload)
    if index < 1:
        raise InvalidIndexError(word)
    return index


def _split_on_marker(payload: str, marker: str, command: str) -> tuple[str, str]:
    # Only the first marker splits; later ones stay in the date segment.
    description, found, when = payload.partition(marker)
    description = description.strip()
    when = when.strip()
    if not description:
        raise EmptyArgumentError(command)
    if not found or not when:
        raise EmptyArgumentError("date/time")
    return description, when


def parse_deadline(payload: str) -> tuple[str, str]:
    """'read book /by 24-08-2021 18:00' -> ('read book', '24-08-2021 18:00')."""
    return _split_on_marker(payload, DEADLINE_MARKER, "deadline")


def parse_event(payload: str) -> tuple[str, str]:
    return _split_on_marker(payload, EVENT_MARKER, "event")


def parse(line: str) -> ParsedCommand:
    word = parse_command_word(line)

    if word == "list":
        return ListCommand()
    if word == "bye":
        return ExitCommand()
    if word == "find":
        return FindCommand(keyword=parse_task_description(line))
    if word == "done":
        return CompleteCommand(index=parse_index(line))
    if word == "delete":
        return DeleteCommand(index=parse_index(line))
    if word == "todo":
        return AddTodoCommand(description=parse_task_description(line))
    if word == "deadline":
        description, by = parse_deadline(parse_task_description(line))
        return AddDeadlineCommand(description=description, by=by)
    if word == "event":
        description, at = parse_event(parse_task_description(line))
        return AddEventCommand(description=description, at=at)

    return UnknownCommand(word=word)
