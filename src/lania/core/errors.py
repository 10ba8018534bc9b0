# src/lania/core/errors.py

"""
Error taxonomy.

Every error carries a user-facing message: the session catches LaniaError at
the command boundary and shows str(exc) to the user as-is.
"""

from __future__ import annotations


class LaniaError(Exception):
    """Base class for every recoverable error the assistant reports."""


class ValidationError(LaniaError):
    """A task could not be built from the given values."""


class EmptyArgumentError(ValidationError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"The description of {field} cannot be empty")


class DateFormatError(ValidationError):
    def __init__(self, text: str) -> None:
        # Keep the raw value for logs; the message stays generic.
        self.text = text
        super().__init__("Invalid date format. Please use dd-MM-yyyy HH:mm, e.g. 24-08-2021 18:00")


class InvalidIndexError(LaniaError):
    def __init__(self, command: str, message: str | None = None) -> None:
        self.command = command
        super().__init__(message or f"The task number for {command} must be a positive number")


class IndexOutOfRangeError(InvalidIndexError):
    def __init__(self, index: int, size: int, command: str = "this command") -> None:
        self.index = index
        self.size = size
        if size == 0:
            msg = f"There is no task {index}: your list is empty"
        else:
            msg = f"There is no task {index}: pick a number from 1 to {size}"
        super().__init__(command, msg)


class UnknownCommandError(LaniaError):
    def __init__(self, word: str = "") -> None:
        self.word = word
        super().__init__("Sorry, but Lania does not know what that means.")


class PersistenceError(LaniaError):
    """Reading or writing the task file failed."""


class CorruptRecordError(LaniaError):
    def __init__(self, line_no: int, line: str, reason: str) -> None:
        self.line_no = line_no
        self.line = line
        self.reason = reason
        super().__init__(f"Line {line_no} of the task file is corrupt ({reason}): {line!r}")
