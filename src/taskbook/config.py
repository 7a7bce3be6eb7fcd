# src/taskbook/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is read from the environment until settings are first requested.
- Library users may skip this module entirely and build TaskStore() directly.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKBOOK"

_TRUE_VALUES = {"1", "true", "yes", "y", "on"}


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
    return raw.strip().lower() in _TRUE_VALUES


def _env_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str = "taskbook"
    log_level: str = "INFO"
    log_dir: Path | None = None

    # ---- Store ----
    thread_safe: bool = True

    @staticmethod
    def from_env(env_file: str | Path | None = None) -> "Settings":
        # .env never overrides variables that are already exported.
        load_dotenv(dotenv_path=env_file, override=False)

        app_name = _env(_k("APP_NAME"), "taskbook").strip() or "taskbook"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=_env_path(_k("LOG_DIR")),
            thread_safe=_env_bool(_k("THREAD_SAFE"), True),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS


def reset_settings() -> None:
    """Drop the cached Settings so the next get_settings() re-reads the env."""
    global _SETTINGS
    _SETTINGS = None
