# src/lania/connectors/matrix_connector.py

from __future__ import annotations

import asyncio
import contextlib
import logging
import threading
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Optional, Set

from nio import MatrixRoom, RoomMessageText

from ..core import messages
from ..core.session import Session
from .matrix_client import create_matrix_client

logger = logging.getLogger(__name__)

MessageCallback = Callable[[MatrixRoom, RoomMessageText], Awaitable[None]]


def _ms_now() -> int:
    return int(time.time() * 1000)


def _room_allowlist(settings_rooms: list[str]) -> Optional[Set[str]]:
    rooms = [r.strip() for r in (settings_rooms or []) if str(r).strip()]
    return set(rooms) if rooms else None


async def _send_text(client: Any, *, room_id: str, text: str) -> None:
    await client.room_send(
        room_id=room_id,
        message_type="m.room.message",
        content={"msgtype": "m.text", "body": text},
    )


def make_message_callback(
    session: Session,
    client: Any,
    *,
    startup_ts: int,
    allowed_rooms: Optional[Set[str]],
    on_exit: Callable[[], None],
) -> MessageCallback:
    """
    Build the room-message handler: one chat message in, one reply out.

    Each message goes through Session.handle (which holds the session lock),
    so chat input never overlaps a console command.
    """

    async def message_callback(room: MatrixRoom, event: RoomMessageText) -> None:
        # Ignore history replayed by the initial sync.
        ts = getattr(event, "server_timestamp", None)
        if ts is not None and ts <= startup_ts:
            return

        if event.sender == client.user_id:
            return

        if allowed_rooms is not None and room.room_id not in allowed_rooms:
            return

        body = (event.body or "").strip()
        if not body:
            return

        logger.info("Matrix <%s> %s sent a command.", room.display_name, event.sender)

        try:
            # handle() rewrites the task file; keep that off the sync loop.
            reply = await asyncio.to_thread(session.handle, body)
            text = reply.text
        except Exception:
            logger.exception("Command handler crashed.")
            reply = None
            text = messages.internal_error()

        try:
            await _send_text(client, room_id=room.room_id, text=text)
        except Exception:
            logger.exception("Failed to send reply to %s.", room.room_id)

        if reply is not None and reply.exit:
            logger.info("Exit requested from Matrix room %s.", room.room_id)
            on_exit()

    return message_callback


async def _run_matrix_bot(
    session: Session,
    settings,
    stop_event: asyncio.Event,
    on_exit: Callable[[], None],
) -> None:
    """
    Matrix connector (async): init -> callback -> sync loop.

    The main thread stops us via loop.call_soon_threadsafe(stop_event.set).
    """
    startup_ts = _ms_now()
    allowed_rooms = _room_allowlist(settings.matrix_rooms)
    logger.info("Matrix allowed_rooms=%s", allowed_rooms if allowed_rooms is not None else "ALL")

    client = await create_matrix_client(settings)
    if client is None:
        logger.error("Matrix client creation failed; connector will stop.")
        return

    def _exit() -> None:
        stop_event.set()
        on_exit()

    callback = make_message_callback(
        session,
        client,
        startup_ts=startup_ts,
        allowed_rooms=allowed_rooms,
        on_exit=_exit,
    )
    client.add_event_callback(callback, RoomMessageText)

    try:
        logger.info("Matrix initial sync...")
        await client.sync(timeout=30000, full_state=True)
        logger.info("Matrix initial sync done. Joined rooms: %d", len(client.rooms))

        while not stop_event.is_set():
            await client.sync(timeout=30000, full_state=False)

    except asyncio.CancelledError:
        logger.info("Matrix connector cancelled.")
    except Exception:
        logger.exception("Matrix connector crashed.")
    finally:
        with contextlib.suppress(Exception):
            await client.close()
        logger.info("Matrix connector stopped.")


@dataclass
class MatrixBackgroundRunner:
    thread: threading.Thread
    loop: asyncio.AbstractEventLoop
    stop_event: asyncio.Event

    def stop(self) -> None:
        try:
            self.loop.call_soon_threadsafe(self.stop_event.set)
        except RuntimeError:
            # Loop already closed.
            logger.debug("Failed to signal Matrix stop.", exc_info=True)

    def join(self, timeout: float | None = None) -> None:
        self.thread.join(timeout=timeout)


def start_matrix_in_background(
    session: Session,
    settings,
    *,
    on_exit: Callable[[], None] = lambda: None,
) -> MatrixBackgroundRunner | None:
    """
    Start the Matrix front end in a background thread with its own event loop,
    so the blocking console REPL can keep the main thread.
    """
    if not settings.matrix_enabled:
        logger.info("Matrix connector disabled, not starting.")
        return None

    if not settings.matrix_homeserver or not settings.matrix_user_id:
        logger.error("Matrix is enabled but not configured (homeserver/user_id).")
        return None

    ready = threading.Event()
    holder: dict[str, object] = {}

    def runner() -> None:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        stop_event = asyncio.Event()

        holder["loop"] = loop
        holder["stop_event"] = stop_event
        ready.set()

        try:
            loop.run_until_complete(_run_matrix_bot(session, settings, stop_event, on_exit))
        finally:
            loop.close()

    t = threading.Thread(target=runner, name="lania-matrix", daemon=True)
    t.start()

    ready.wait(timeout=5.0)
    loop = holder.get("loop")
    stop_event = holder.get("stop_event")

    if not isinstance(loop, asyncio.AbstractEventLoop) or not isinstance(stop_event, asyncio.Event):
        logger.error("Matrix thread did not initialize properly.")
        return None

    logger.info("Matrix background thread started.")
    return MatrixBackgroundRunner(thread=t, loop=loop, stop_event=stop_event)
