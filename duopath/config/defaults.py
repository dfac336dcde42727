"""duopath config defaults.

No side effects on import. Values can be overridden via DP_* environment
variables; they are read once when this module is imported.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env(name: str, default: str) -> str:
    if not name.startswith("DP_"):
        raise ValueError(f"Only DP_* env vars are allowed, got: {name}")
    return os.getenv(name, default)


def _env_bool(name: str, default: bool) -> bool:
    raw = _env(name, str(default))
    return raw.lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = _env(name, str(default))
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    """Runtime settings for duopath.

    Frozen to prevent accidental mutation. For tests, set environment
    variables and reload this module, or monkeypatch the module-level
    ``settings`` with a new instance.
    """

    # Legacy Windows MAX_PATH (including NUL); longer absolute paths get \\?\
    windows_max_path: int = _env_int("DP_WINDOWS_MAX_PATH", 260)
    # Registry name of the default filesystem capability ("" = host)
    filesystem: str = _env("DP_FILESYSTEM", "")

    # Structured logging
    log_dir: str = _env("DP_LOG_DIR", "")
    log_console: bool = _env_bool("DP_LOG_CONSOLE", False)
    log_level: str = _env("DP_LOG_LEVEL", "info")
    log_max_size_mb: int = _env_int("DP_LOG_MAX_SIZE_MB", 0)


settings = Settings()


__all__ = ["Settings", "settings"]
