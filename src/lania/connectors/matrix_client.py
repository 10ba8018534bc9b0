# src/lania/connectors/matrix_client.py

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from nio import AsyncClient, AsyncClientConfig, LoginResponse

logger = logging.getLogger(__name__)


def _session_path(store_dir: Path) -> Path:
    return store_dir / "session.json"


def _load_json(path: Path) -> dict[str, Any]:
    val = json.loads(path.read_text("utf-8"))
    if isinstance(val, dict):
        return val
    raise ValueError("Expected JSON object")


def _atomic_write_json(path: Path, data: dict[str, Any]) -> None:
    tmp = path.with_suffix(".tmp")
    tmp.write_text(json.dumps(data, ensure_ascii=False), "utf-8")
    os.replace(tmp, path)
    try:
        os.chmod(path, 0o600)
    except OSError:
        # Not critical on Windows or restricted FS.
        logger.debug("chmod on %s failed.", path, exc_info=True)


async def create_matrix_client(settings) -> AsyncClient | None:
    """
    Create a Matrix AsyncClient for the chat front end.

    session.json keeps the access token/device id across restarts so the
    password is only needed once. It holds a credential: keep data_dir out of git.
    """
    homeserver = (settings.matrix_homeserver or "").strip()
    user_id = (settings.matrix_user_id or "").strip()
    password = (settings.matrix_password or "").strip()
    store_dir = Path(settings.matrix_store_path)

    if not homeserver or not user_id:
        logger.error("Matrix is not configured: set LANIA_MATRIX_HOMESERVER and LANIA_MATRIX_USER_ID")
        return None

    store_dir.mkdir(parents=True, exist_ok=True)
    session_file = _session_path(store_dir)

    client = AsyncClient(
        homeserver,
        user_id,
        config=AsyncClientConfig(encryption_enabled=False, store_sync_tokens=False),
    )

    # ---- Session restore ----
    if session_file.exists():
        try:
            data = _load_json(session_file)

            access_token = data.get("access_token")
            sess_user_id = data.get("user_id")
            device_id = data.get("device_id")

            if not access_token or not sess_user_id or not device_id:
                raise ValueError("session.json is missing required fields")

            client.access_token = str(access_token)
            client.user_id = str(sess_user_id)
            client.device_id = str(device_id)
            logger.info("Matrix session restored for %s", client.user_id)
            return client
        except (OSError, ValueError) as e:
            logger.warning("Failed to restore Matrix session.json, will try password login: %r", e)

    # ---- Password login bootstrap ----
    if not password:
        logger.error(
            "Matrix session.json not found and password is not set. "
            "Set LANIA_MATRIX_PASSWORD once to bootstrap a session."
        )
        await client.close()
        return None

    device_name = f"{settings.app_name} (Python)"
    logger.info("Logging in to Matrix to bootstrap a new session (device_name=%r)...", device_name)

    resp = await client.login(password=password, device_name=device_name)

    if not isinstance(resp, LoginResponse):
        logger.error("Matrix login failed: %r", resp)
        await client.close()
        return None

    try:
        _atomic_write_json(
            session_file,
            {"access_token": resp.access_token, "user_id": resp.user_id, "device_id": resp.device_id},
        )
        logger.info("Matrix session saved to %s (user=%s)", session_file, resp.user_id)
    except OSError as e:
        # The login itself worked; we just log in again next start.
        logger.error("Failed to write Matrix session.json (%s): %r", session_file, e)

    return client
