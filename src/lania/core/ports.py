# src/lania/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations, so the
file store can be swapped for an in-memory fake in tests.
"""

from typing import Protocol


class LinesStore(Protocol):
    """
    Raw read/write-lines capability behind the task file.

    read_lines() returns [] when nothing has been stored yet.
    Both methods raise OSError on I/O failure.
    """

    def read_lines(self) -> list[str]: ...
    def write_lines(self, lines: list[str]) -> None: ...
