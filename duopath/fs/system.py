"""Filesystem capabilities and the registry that selects one.

Path and the module-level operations never touch ``os`` directly; they render
themselves with the capability's grammar and call one of the methods below.
Every method raises ``OSError`` on failure (with ``errno`` preserved) and the
callers decide whether the failure is reported as ``False`` or as an error.
"""

from __future__ import annotations

import os
import stat as _stat
from typing import Callable, Dict, Protocol, runtime_checkable

from ..config import defaults as _defaults
from ._types import PathKind, StatResult


@runtime_checkable
class FileSystem(Protocol):
    """OS collaborator consumed by Path, operations and Resolver."""

    kind: PathKind

    def stat(self, native: str) -> StatResult:
        """Return metadata for ``native``, following symlinks."""
        ...

    def mkdir(self, native: str) -> None:
        """Create exactly one directory level."""
        ...

    def remove(self, native: str) -> None:
        """Delete a file."""
        ...

    def truncate(self, native: str, length: int) -> None:
        """Resize a file to ``length`` bytes."""
        ...

    def canonicalize(self, native: str) -> str:
        """Return the OS canonical absolute form of ``native``."""
        ...

    def getcwd(self) -> str:
        """Return the current working directory."""
        ...


def _stat_result(native: str) -> StatResult:
    st = os.stat(native)
    return StatResult(
        is_dir=_stat.S_ISDIR(st.st_mode),
        is_file=_stat.S_ISREG(st.st_mode),
        size=st.st_size,
    )


class PosixFileSystem:
    """Capability backed by POSIX system calls."""

    kind = PathKind.POSIX

    def __init__(self, *, dir_mode: int = 0o700) -> None:
        self.dir_mode = dir_mode

    def stat(self, native: str) -> StatResult:
        return _stat_result(native)

    def mkdir(self, native: str) -> None:
        os.mkdir(native, self.dir_mode)

    def remove(self, native: str) -> None:
        os.remove(native)

    def truncate(self, native: str, length: int) -> None:
        os.truncate(native, length)

    def canonicalize(self, native: str) -> str:
        # realpath(3) semantics: the path must exist
        return os.path.realpath(native, strict=True)

    def getcwd(self) -> str:
        return os.getcwd()

    def __repr__(self) -> str:
        return f"PosixFileSystem(dir_mode={oct(self.dir_mode)})"


class WindowsFileSystem:
    """Capability backed by Win32 calls through the ``os`` module.

    ``canonicalize`` follows GetFullPathNameW, which makes the path absolute
    without requiring it to exist.
    """

    kind = PathKind.WINDOWS

    def stat(self, native: str) -> StatResult:
        return _stat_result(native)

    def mkdir(self, native: str) -> None:
        os.mkdir(native)

    def remove(self, native: str) -> None:
        os.remove(native)

    def truncate(self, native: str, length: int) -> None:
        with open(native, "r+b") as handle:
            handle.truncate(length)

    def canonicalize(self, native: str) -> str:
        return os.path.abspath(native)

    def getcwd(self) -> str:
        return os.getcwd()

    def __repr__(self) -> str:
        return "WindowsFileSystem()"


FileSystemFactory = Callable[[], FileSystem]
_registry: Dict[str, FileSystemFactory] = {}


def register_filesystem(name: str, factory: FileSystemFactory) -> None:
    """Register a filesystem factory by name."""
    _registry[name] = factory


def available() -> list[str]:
    """Get list of registered filesystem names."""
    return sorted(_registry.keys())


def create(name: str) -> FileSystem:
    """Create a filesystem capability by name."""
    try:
        return _registry[name]()
    except KeyError:
        raise ValueError(f"Unknown filesystem: {name}")


def host_filesystem_name() -> str:
    return "windows" if os.name == "nt" else "posix"


def get_filesystem(fs: FileSystem | None = None) -> FileSystem:
    """Return ``fs`` if given, otherwise the default capability.

    The default is named by ``DP_FILESYSTEM`` and falls back to the host
    grammar when unset.
    """
    if fs is not None:
        return fs
    name = _defaults.settings.filesystem or host_filesystem_name()
    return create(name)


register_filesystem("posix", PosixFileSystem)
register_filesystem("windows", WindowsFileSystem)


__all__ = [
    "FileSystem",
    "PosixFileSystem",
    "WindowsFileSystem",
    "register_filesystem",
    "available",
    "create",
    "get_filesystem",
    "host_filesystem_name",
]
