# src/ledger/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Settings are built once at startup and handed to the rest of the app
through AppState; nothing reads the environment after that.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "LEDGER"

DEFAULT_DIR_NAME = ".goledger"
TASKS_FILE_NAME = "tasks.json"
LOG_FILE_NAME = "ledger.log"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


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
    log_to_file: bool

    # ---- Local data paths ----
    data_dir: Path
    tasks_path: Path
    log_path: Path

    # ---- Defaults for commands ----
    report_days: int

    @staticmethod
    def from_env(*, load_env_file: bool = True) -> "Settings":
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True), override=False)

        app_name = _env(_k("APP_NAME"), "ledger") or "ledger"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        log_to_file = _env_bool(_k("LOG_FILE"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path.home() / DEFAULT_DIR_NAME)
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / TASKS_FILE_NAME)
        log_path = data_dir / LOG_FILE_NAME

        report_days = _env_int(_k("REPORT_DAYS"), 7)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            data_dir=data_dir,
            tasks_path=tasks_path,
            log_path=log_path,
            report_days=report_days,
        )


def get_settings() -> Settings:
    return Settings.from_env()
