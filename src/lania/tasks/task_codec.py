# src/lania/tasks/task_codec.py

"""
Line codec for the task file.

One record per line:

    T | 0 | read book
    D | 1 | return book | 24-08-2021 18:00
    E | 0 | book club | 25-08-2021 19:30

The date field uses the same dd-MM-yyyy HH:mm pattern users type, so decoding
re-derives exactly the stored value. It is split off from the right, which
lets descriptions contain the delimiter.

This module is the only place that knows the file format.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..core.errors import CorruptRecordError, ValidationError
from .task_list import TaskList
from .task_models import Task, TaskKind, format_input_datetime, parse_datetime

DELIMITER = " | "

_DONE_FLAGS = {"0": False, "1": True}


def encode_record(task: Task) -> str:
    fields = [task.kind.value, "1" if task.is_done else "0", task.description]
    if task.when is not None:
        fields.append(format_input_datetime(task.when))
    return DELIMITER.join(fields)


def encode(tasks: Iterable[Task]) -> list[str]:
    return [encode_record(t) for t in tasks]


def decode_record(line: str, line_no: int = 1) -> Task:
    """Decode one stored line; raises CorruptRecordError on any format drift."""
    raw = line.rstrip("\r\n")
    parts = raw.split(DELIMITER, 2)
    if len(parts) < 3:
        raise CorruptRecordError(line_no, raw, f"expected at least 3 fields, got {len(parts)}")

    kind_raw, flag_raw, rest = parts
    try:
        kind = TaskKind(kind_raw.strip())
    except ValueError:
        raise CorruptRecordError(line_no, raw, f"unknown task kind {kind_raw!r}") from None

    is_done = _DONE_FLAGS.get(flag_raw.strip())
    if is_done is None:
        raise CorruptRecordError(line_no, raw, f"done flag must be 0 or 1, got {flag_raw!r}")

    description = rest
    when = None
    if kind is not TaskKind.TODO:
        head, sep, date_raw = rest.rpartition(DELIMITER)
        if not sep:
            raise CorruptRecordError(line_no, raw, "missing date/time field")
        description = head
        try:
            when = parse_datetime(date_raw)
        except ValidationError:
            raise CorruptRecordError(line_no, raw, f"unparsable date {date_raw!r}") from None

    try:
        return Task(kind=kind, description=description, when=when, is_done=is_done)
    except ValidationError as e:
        raise CorruptRecordError(line_no, raw, str(e)) from None


def decode(lines: Iterable[str]) -> TaskList:
    """
    Strict decode: the first malformed line aborts with CorruptRecordError.

    Blank lines are ignored. Callers wanting skip-and-continue should iterate
    with decode_record themselves (see TaskStore.load).
    """
    tasks = TaskList()
    for line_no, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        tasks.add(decode_record(line, line_no))
    return tasks
