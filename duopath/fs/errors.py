"""Exception hierarchy for duopath."""

from __future__ import annotations


class PathError(Exception):
    """Base class for all duopath errors."""


class PathArgumentError(PathError, ValueError):
    """Raised when an operation is called with arguments that break its contract."""


class PathOSError(PathError, OSError):
    """Raised when a mandatory OS call fails.

    Carries ``errno``, ``strerror`` and ``filename`` from the underlying
    ``OSError``. Build it with :meth:`from_os_error` and chain with
    ``raise ... from exc``.
    """

    @classmethod
    def from_os_error(
        cls, exc: OSError, message: str, filename: str | None = None
    ) -> "PathOSError":
        if exc.errno is None:
            return cls(f"{message}: {exc}")
        return cls(exc.errno, f"{message}: {exc.strerror}", filename or exc.filename)


class PathNotFoundError(PathOSError):
    """Raised when metadata for a path cannot be read."""


__all__ = [
    "PathError",
    "PathArgumentError",
    "PathOSError",
    "PathNotFoundError",
]
