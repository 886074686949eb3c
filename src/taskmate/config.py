# src/taskmate/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing written to disk at import time.
- Optional config_local.py for safe machine-specific overrides.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKMATE"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


# Real environment variables win over .env entries.
load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
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
    log_dir: Path

    # ---- Console ----
    console_enabled: bool
    show_timestamps: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_path: Path

    # ---- Undo ----
    undo_depth: int

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskmate").strip() or "taskmate"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)
        show_timestamps = _env_bool(_k("SHOW_TIMESTAMPS"), False)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskmate"))
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "tasks.json")
        log_dir = _env_path(_k("LOG_DIR"), data_dir)

        # Undo needs at least one level to be meaningful.
        undo_depth = max(1, _env_int(_k("UNDO_DEPTH"), 20))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            console_enabled=console_enabled,
            show_timestamps=show_timestamps,
            data_dir=data_dir,
            tasks_path=tasks_path,
            undo_depth=undo_depth,
        )


SETTINGS = Settings.from_env()

# ---- Optional local overrides (never committed) ----
# Prefer .env; use config_local.py only for safe overrides.
try:
    import config_local as _config_local  # type: ignore

    # Simple overrides for selected names. Keep it explicit.
    if hasattr(_config_local, "UNDO_DEPTH"):
        object.__setattr__(SETTINGS, "undo_depth", max(1, int(_config_local.UNDO_DEPTH)))  # type: ignore[misc]
    if hasattr(_config_local, "DATA_DIR"):
        _data_dir = Path(_config_local.DATA_DIR).expanduser()
        object.__setattr__(SETTINGS, "data_dir", _data_dir)  # type: ignore[misc]
        object.__setattr__(SETTINGS, "tasks_path", _data_dir / "tasks.json")  # type: ignore[misc]
except ImportError:
    pass


def get_settings() -> Settings:
    return SETTINGS
