# src/file_reaper/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Paths are relative to the working directory unless given as absolute.
- Components receive settings by injection; get_settings() is only for the CLI.

Environment variables:
- REAPER_APP_NAME      display name in logs (default: file-reaper)
- REAPER_LOG_LEVEL     console log level (default: INFO)
- REAPER_TASKS_PATH    task document (default: tasks.json)
- REAPER_LOG_DIR       directory for the full log file (default: .local/file_reaper)
- REAPER_LOG_TO_FILE   write the full log file (default: true)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "REAPER"

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
    log_dir: Path
    log_to_file: bool

    # ---- Task document ----
    tasks_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "file-reaper").strip() or "file-reaper"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        log_dir = _env_path(_k("LOG_DIR"), Path(".local/file_reaper"))
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        tasks_path = _env_path(_k("TASKS_PATH"), Path("tasks.json"))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            log_to_file=log_to_file,
            tasks_path=tasks_path,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
