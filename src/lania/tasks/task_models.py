# src/lania/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from ..core.errors import DateFormatError, ValidationError

# What users type and what the task file stores.
INPUT_DATETIME_FORMAT = "%d-%m-%Y %H:%M"
# strptime alone would also take "1-8-2021 6:00".
_INPUT_DATETIME_SHAPE = re.compile(r"\d{2}-\d{2}-\d{4} \d{2}:\d{2}", re.ASCII)


class TaskKind(StrEnum):
    """
    Task variant tag.

    The value doubles as the display tag ("[T]") and the first field of a
    stored record, so it must stay stable.
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @property
    def label(self) -> str:
        return self.name.lower()


# Deadline/Event render their date after this keyword: "(by: ...)" / "(at: ...)".
DATE_KEYWORDS: dict[TaskKind, str] = {
    TaskKind.DEADLINE: "by",
    TaskKind.EVENT: "at",
}


def parse_datetime(text: str) -> datetime:
    """Parse a `dd-MM-yyyy HH:mm` string; anything else is a DateFormatError."""
    raw = (text or "").strip()
    if not _INPUT_DATETIME_SHAPE.fullmatch(raw):
        raise DateFormatError(raw)
    try:
        return datetime.strptime(raw, INPUT_DATETIME_FORMAT)
    except ValueError:
        raise DateFormatError(raw) from None


def format_datetime(dt: datetime) -> str:
    """Human form, e.g. 'Aug 24 2021 6:00PM'."""
    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return f"{dt:%b} {dt.day} {dt.year} {hour}:{dt:%M}{meridiem}"


def format_input_datetime(dt: datetime) -> str:
    return dt.strftime(INPUT_DATETIME_FORMAT)


def _single_line(text: str | None) -> str:
    """One task is one stored line: fold every break str.splitlines knows into a space."""
    return " ".join(part.strip() for part in (text or "").splitlines() if part.strip())


@dataclass(slots=True)
class Task:
    kind: TaskKind
    description: str
    when: datetime | None = None
    is_done: bool = False

    def __post_init__(self) -> None:
        self.kind = TaskKind(self.kind)
        self.description = _single_line(self.description)
        if not self.description:
            raise ValidationError(f"The description of {self.kind.label} cannot be empty")
        if self.kind is TaskKind.TODO and self.when is not None:
            raise ValidationError("A todo does not take a date/time")
        if self.kind is not TaskKind.TODO and self.when is None:
            raise ValidationError(f"The date/time of {self.kind.label} cannot be empty")

    # ---- constructors ----

    @classmethod
    def construct(cls, kind: TaskKind | str, description: str, when: str | None = None) -> Task:
        dt = parse_datetime(when) if when is not None else None
        return cls(kind=TaskKind(kind), description=description, when=dt)

    @classmethod
    def todo(cls, description: str) -> Task:
        return cls.construct(TaskKind.TODO, description)

    @classmethod
    def deadline(cls, description: str, by: str) -> Task:
        return cls.construct(TaskKind.DEADLINE, description, by)

    @classmethod
    def event(cls, description: str, at: str) -> Task:
        return cls.construct(TaskKind.EVENT, description, at)

    # ---- behavior ----

    def mark_complete(self) -> None:
        self.is_done = True

    def render(self) -> str:
        mark = "x" if self.is_done else " "
        text = f"[{self.kind.value}][{mark}] {self.description}"
        keyword = DATE_KEYWORDS.get(self.kind)
        if keyword and self.when is not None:
            text += f" ({keyword}: {format_datetime(self.when)})"
        return text

    def __str__(self) -> str:
        return self.render()
