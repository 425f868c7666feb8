# src/task_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a working default, so the CLI runs with no configuration.
- Storage location and permission modes are configurable, tests inject their own.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASK_CLI"

DEFAULT_STORAGE_DIR = Path("storage")
DEFAULT_DATA_FILE = "data.json"
DEFAULT_DIR_MODE = 0o755
DEFAULT_FILE_MODE = 0o644


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_mode(name: str, default: int) -> int:
    """Parse a permission mode written in octal ("755", "0755" or "0o755")."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    text = raw.strip().lower()
    if text.startswith("0o"):
        text = text[2:]
    try:
        mode = int(text, 8)
    except ValueError:
        return default
    if not 0 <= mode <= 0o777:
        return default
    return mode


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_file: Path | None

    # ---- Storage ----
    storage_dir: Path
    data_file_name: str
    dir_mode: int
    file_mode: int

    @property
    def data_path(self) -> Path:
        return self.storage_dir / self.data_file_name

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "task-cli").strip() or "task-cli"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_file = _env_path(_k("LOG_FILE"), None)

        storage_dir = _env_path(_k("STORAGE_DIR"), DEFAULT_STORAGE_DIR) or DEFAULT_STORAGE_DIR
        data_file_name = _env(_k("DATA_FILE"), DEFAULT_DATA_FILE).strip() or DEFAULT_DATA_FILE

        dir_mode = _env_mode(_k("DIR_MODE"), DEFAULT_DIR_MODE)
        file_mode = _env_mode(_k("FILE_MODE"), DEFAULT_FILE_MODE)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_file=log_file,
            storage_dir=storage_dir,
            data_file_name=data_file_name,
            dir_mode=dir_mode,
            file_mode=file_mode,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
