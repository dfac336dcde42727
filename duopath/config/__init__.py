"""duopath centralized configuration for runtime settings.

All settings are backed by environment variables following the DP_* naming
convention.

Example:
    >>> from duopath.config import settings
    >>> settings.windows_max_path
    260

Environment Variables:
    DP_WINDOWS_MAX_PATH: Legacy Windows path limit incl. NUL (default: 260)
    DP_FILESYSTEM: Force the default filesystem capability ("posix"/"windows")
    DP_LOG_DIR: Directory for JSONL structured logs (default: unset)
    DP_LOG_CONSOLE: Echo structured logs to stdout (default: false)
    DP_LOG_LEVEL: Minimum structured log level (default: info)
    DP_LOG_MAX_SIZE_MB: Rotate JSONL logs past this size, 0 disables (default: 0)
    DP_RESOLVER_PATH: os.pathsep separated resolver bases (read on demand)
"""

from __future__ import annotations

from duopath.config.defaults import Settings, settings

__all__ = [
    "settings",
    "Settings",
]
