# src/lania/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- No secrets required at import time (Matrix is off unless configured).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

ENV_PREFIX = "LANIA"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    return [p.strip() for p in raw.replace(",", " ").split() if p.strip()]


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Connector flags ----
    console_enabled: bool
    matrix_enabled: bool

    # ---- Matrix ----
    matrix_homeserver: str
    matrix_user_id: str
    matrix_password: Optional[str]
    matrix_rooms: List[str]

    # ---- Local data paths ----
    data_dir: Path
    tasks_path: Path
    log_dir: Path
    matrix_store_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "Lania").strip() or "Lania"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)
        matrix_enabled = _env_bool(_k("MATRIX_ENABLED"), False)

        matrix_homeserver = _env(_k("MATRIX_HOMESERVER")).strip()
        matrix_user_id = _env(_k("MATRIX_USER_ID")).strip()
        matrix_password = _env(_k("MATRIX_PASSWORD")).strip() or None
        matrix_rooms = _env_list(_k("MATRIX_ROOMS"), [])

        data_dir = _env_path(_k("DATA_DIR"), Path("data"))
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "lania.txt")
        log_dir = _env_path(_k("LOG_DIR"), data_dir)
        matrix_store_path = _env_path(_k("MATRIX_STORE_PATH"), data_dir / "matrix_store")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            console_enabled=console_enabled,
            matrix_enabled=matrix_enabled,
            matrix_homeserver=matrix_homeserver,
            matrix_user_id=matrix_user_id,
            matrix_password=matrix_password,
            matrix_rooms=matrix_rooms,
            data_dir=data_dir,
            tasks_path=tasks_path,
            log_dir=log_dir,
            matrix_store_path=matrix_store_path,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
