"""Filesystem mutations that operate on a Path.

Boolean-returning helpers report any ``OSError`` as ``False``; absence and
refusal are not exceptional here. The specific reason is only logged at debug
level. ``current_working_directory`` is mandatory and raises instead.
"""

from __future__ import annotations

import errno
import logging

from .errors import PathArgumentError, PathOSError
from .path import Path
from .system import FileSystem, get_filesystem

logger = logging.getLogger(__name__)


def create_directory(p: Path, *, fs: FileSystem | None = None) -> bool:
    """Create exactly one directory level; ``False`` on any failure.

    "Already exists" counts as a failure.
    """
    return _mkdir(p, get_filesystem(fs)) is None


def _mkdir(p: Path, fs: FileSystem) -> OSError | None:
    native = p.render(fs.kind)
    try:
        fs.mkdir(native)
    except OSError as exc:
        logger.debug(f"mkdir failed for {native!r}: {exc}")
        return exc
    return None


def create_directories(p: Path, *, fs: FileSystem | None = None) -> bool:
    """Create ``p`` along with any missing parents.

    Tries ``p`` first; only when that fails because a parent is missing does it
    walk up the lexical parents until one can be created, then creates the
    missing levels top-down. Any other failure (permission denied, already
    exists, a file in the way) returns ``False``, so calling this twice on the
    same path returns ``True`` then ``False``. An empty path returns ``False``.
    """
    fs = get_filesystem(fs)
    if p.is_empty:
        return False
    missing = []
    current = p
    while True:
        exc = _mkdir(current, fs)
        if exc is None:
            break
        if exc.errno != errno.ENOENT:
            return False
        missing.append(current)
        current = current.parent()
        if current.is_empty:
            return False
    for level in reversed(missing):
        if _mkdir(level, fs) is not None:
            return False
    return True


def remove_file(p: Path, *, fs: FileSystem | None = None) -> bool:
    fs = get_filesystem(fs)
    native = p.render(fs.kind)
    try:
        fs.remove(native)
    except OSError as exc:
        logger.debug(f"remove failed for {native!r}: {exc}")
        return False
    return True


def resize_file(p: Path, new_length: int, *, fs: FileSystem | None = None) -> bool:
    """Truncate or extend a file to ``new_length`` bytes.

    Raises:
        PathArgumentError: If ``new_length`` is negative
    """
    if new_length < 0:
        raise PathArgumentError(f"resize_file(): length must be >= 0, got {new_length}")
    fs = get_filesystem(fs)
    native = p.render(fs.kind)
    try:
        fs.truncate(native, new_length)
    except OSError as exc:
        logger.debug(f"truncate failed for {native!r}: {exc}")
        return False
    return True


def current_working_directory(*, fs: FileSystem | None = None) -> Path:
    """Return the working directory as a Path in the capability's grammar.

    Raises:
        PathOSError: If the OS cannot report a working directory
    """
    fs = get_filesystem(fs)
    try:
        raw = fs.getcwd()
    except OSError as exc:
        raise PathOSError.from_os_error(exc, "getcwd() failed") from exc
    return Path.parse(raw, fs.kind)


def cwd(*, fs: FileSystem | None = None) -> Path:
    return current_working_directory(fs=fs)


__all__ = [
    "create_directory",
    "create_directories",
    "remove_file",
    "resize_file",
    "current_working_directory",
    "cwd",
]
