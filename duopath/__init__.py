"""duopath: POSIX and Windows paths as structured values, plus a resolver."""

from duopath.fs import (
    Path,
    PathArgumentError,
    PathError,
    PathKind,
    PathNotFoundError,
    PathOSError,
    Resolver,
    create_directories,
    create_directory,
    current_working_directory,
    remove_file,
    resize_file,
)

__version__ = "0.1.0"

__all__ = [
    "Path",
    "PathKind",
    "PathError",
    "PathArgumentError",
    "PathOSError",
    "PathNotFoundError",
    "Resolver",
    "create_directory",
    "create_directories",
    "remove_file",
    "resize_file",
    "current_working_directory",
]
