# tests/test_task_codec.py

from __future__ import annotations

import pytest

from lania.core.errors import CorruptRecordError
from lania.tasks import task_codec
from lania.tasks.task_list import TaskList
from lania.tasks.task_models import Task


def _snapshot(tasks: TaskList) -> list[tuple]:
    return [(t.kind, t.description, t.is_done, t.when) for t in tasks]


def test_encode_format() -> None:
    tasks = TaskList(
        [
            Task.todo("read book"),
            Task.deadline("return book", "24-08-2021 18:00"),
            Task.event("book club", "25-08-2021 19:30"),
        ]
    )
    tasks.complete(2)
    assert task_codec.encode(tasks) == [
        "T | 0 | read book",
        "D | 1 | return book | 24-08-2021 18:00",
        "E | 0 | book club | 25-08-2021 19:30",
    ]


def test_round_trip_preserves_everything() -> None:
    tasks = TaskList(
        [
            Task.todo("read book"),
            Task.deadline("pay rent | utilities", "01-09-2021 09:00"),
            Task.event("concert", "31-12-2021 23:59"),
            Task.todo("a | b | c"),
        ]
    )
    tasks.complete(3)

    decoded = task_codec.decode(task_codec.encode(tasks))
    assert _snapshot(decoded) == _snapshot(tasks)


def test_decode_skips_blank_lines() -> None:
    decoded = task_codec.decode(["", "T | 0 | a", "   ", "T | 1 | b"])
    assert [t.description for t in decoded] == ["a", "b"]


@pytest.mark.parametrize(
    ("line", "reason"),
    [
        ("T | 0", "fields"),
        ("X | 0 | what", "kind"),
        ("T | yes | read", "done flag"),
        ("D | 0 | read book", "date/time"),
        ("D | 0 | read book | tomorrow", "date"),
        ("E | 1 |  | 24-08-2021 18:00", "empty"),
    ],
)
def test_decode_record_rejects_drift(line: str, reason: str) -> None:
    with pytest.raises(CorruptRecordError) as exc:
        task_codec.decode_record(line, 7)
    assert exc.value.line_no == 7
    assert reason in exc.value.reason


def test_strict_decode_aborts_on_first_bad_line() -> None:
    with pytest.raises(CorruptRecordError) as exc:
        task_codec.decode(["T | 0 | ok", "garbage", "T | 0 | never reached"])
    assert exc.value.line_no == 2
