# src/lania/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path


# Console minimum level by logger-name prefix; first match wins.
# The Matrix connector runs in a background thread and would interleave with
# the prompt, so only its problems reach the console.
_CONSOLE_LEVELS: tuple[tuple[str, int], ...] = (
    ("lania.connectors.matrix_", logging.WARNING),
    ("lania.", logging.NOTSET),
)
# Third-party libraries and captured py.warnings.
_CONSOLE_DEFAULT_LEVEL = logging.ERROR


class _ConsoleNoiseFilter(logging.Filter):
    """Keep the interactive console readable (see _CONSOLE_LEVELS); the log file gets everything."""

    def filter(self, record: logging.LogRecord) -> bool:
        for prefix, level in _CONSOLE_LEVELS:
            if record.name.startswith(prefix):
                return record.levelno >= level
        return record.levelno >= _CONSOLE_DEFAULT_LEVEL


def setup_logging(
    *,
    log_dir: str | Path = "data",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure logging with:
    - Console handler (stderr, filtered) so replies on stdout stay clean
    - File handler with everything, for debugging

    Call this ONCE, before the first log line.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "lania.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    logging.captureWarnings(True)
