# src/lania/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the Session, then starts front ends:
- console REPL in the main thread (optional),
- Matrix room bot in a background thread (optional).
"""

from __future__ import annotations

import logging
import signal
import threading
from typing import TYPE_CHECKING

from ..cli.bootstrap import create_initial_session
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ..connectors.matrix_connector import MatrixBackgroundRunner


def main() -> int:
    settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logging.getLogger("nio").setLevel(max(console_level, logging.INFO))
    logging.getLogger("aiohttp").setLevel(logging.WARNING)

    logger.info("Starting %s...", settings.app_name)

    session = create_initial_session(settings=settings)

    # Set by `bye` from any front end, or by a signal.
    stop_main = threading.Event()

    matrix_runner: MatrixBackgroundRunner | None = None
    if settings.matrix_enabled:
        from ..connectors.matrix_connector import start_matrix_in_background

        matrix_runner = start_matrix_in_background(session, settings, on_exit=stop_main.set)

    def _handle_signal(signum, _frame) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        stop_main.set()

    if not settings.console_enabled:
        # With the console on, Ctrl+C stays a KeyboardInterrupt for input().
        signal.signal(signal.SIGINT, _handle_signal)
    if hasattr(signal, "SIGTERM"):
        signal.signal(signal.SIGTERM, _handle_signal)

    try:
        if settings.console_enabled:
            run_console_loop(session)
            stop_main.set()
        elif matrix_runner is not None:
            logger.info("Console disabled. Running the Matrix front end only. Press Ctrl+C to stop.")
            stop_main.wait()
        else:
            logger.error("No front end enabled (console and Matrix are both off).")
            return 1
    finally:
        if matrix_runner is not None:
            matrix_runner.stop()
            matrix_runner.join(timeout=10.0)
        logger.info("Bye.")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
