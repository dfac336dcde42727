"""Path value type, filesystem capabilities and resolver."""

from ._types import PathKind, StatResult
from .errors import PathArgumentError, PathError, PathNotFoundError, PathOSError
from .path import Path
from .system import FileSystem, PosixFileSystem, WindowsFileSystem, get_filesystem
from .operations import (
    create_directories,
    create_directory,
    current_working_directory,
    cwd,
    remove_file,
    resize_file,
)
from .resolver import Resolver

__all__ = [
    "PathKind",
    "StatResult",
    "PathError",
    "PathArgumentError",
    "PathOSError",
    "PathNotFoundError",
    "Path",
    "FileSystem",
    "PosixFileSystem",
    "WindowsFileSystem",
    "get_filesystem",
    "create_directory",
    "create_directories",
    "remove_file",
    "resize_file",
    "current_working_directory",
    "cwd",
    "Resolver",
]
