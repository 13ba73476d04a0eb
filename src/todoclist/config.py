# src/todoclist/config.py

"""Settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object per process, injectable everywhere for tests.
- The task-list file name and default directory are fixed constants, but they
  travel through Settings instead of being read as globals.
"""

from __future__ import annotations

import functools
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TODOCLIST"

APP_NAME = "todoclist"
TASKS_FILE = "todoclist.json"
DEFAULT_DIR = Path(".")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_optional_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    app_name: str

    # ---- Task list location ----
    file_name: str
    default_dir: Path

    # ---- Logging ----
    log_level: str
    log_file: Path | None

    @staticmethod
    def from_env() -> "Settings":
        load_dotenv(find_dotenv(usecwd=True), override=False)

        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_file = _env_optional_path(_k("LOG_FILE"))

        return Settings(
            app_name=APP_NAME,
            file_name=TASKS_FILE,
            default_dir=DEFAULT_DIR,
            log_level=log_level,
            log_file=log_file,
        )


@functools.cache
def get_settings() -> Settings:
    return Settings.from_env()
