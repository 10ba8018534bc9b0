# src/lania/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from datetime import datetime

from ..core import messages
from ..core.session import Session

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _rewrite_prev_line(line: str) -> None:
    """
    Replace the last terminal line with `line`.
    Best-effort: if not a TTY, leave the echo alone.
    """
    try:
        if sys.stdout.isatty():
            sys.stdout.write("\033[1A\033[2K\r")
            sys.stdout.write(line + "\n")
            sys.stdout.flush()
    except (OSError, ValueError):
        logger.debug("Failed to rewrite input line.", exc_info=True)


def _print_ts_block(text: str) -> None:
    ts = _ts_local()
    lines = text.splitlines() or [""]
    for i, line in enumerate(lines):
        # keep alignment for multi-line replies (task lists)
        prefix = f"[{ts}] " if i == 0 else " " * (len(ts) + 3)
        print(prefix + line)


def run_console_loop(session: Session) -> None:
    """Read one line, answer it, repeat until `bye` (or EOF / Ctrl+C)."""
    logger.info("Console connector started.")
    _print_ts_block(session.greeting())

    while True:
        try:
            user_input = input(">>> You: ").strip()
            _rewrite_prev_line(f"[{_ts_local()}] >>> You: {user_input}")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        try:
            reply = session.handle(user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            _print_ts_block(messages.internal_error())
            continue

        _print_ts_block(reply.text)
        if reply.exit:
            break

    logger.info("Console connector finished.")
