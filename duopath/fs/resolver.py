"""Ordered search of a relative path over a list of base directories."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Optional, Tuple, overload

from ..config import defaults as _defaults
from ..config.paths import resolver_search_path
from ..logging import StructuredLogger, create_logger
from ._types import PathKind
from .path import Path, PathLike
from .system import FileSystem, get_filesystem


class Resolver:
    """Find the first base under which a relative path exists.

    Bases are tried in the order given; the first ``base / candidate`` that
    exists on disk wins. When none does, the candidate comes back unchanged,
    so callers that need to tell "found" from "not found" must check
    existence themselves. Nothing is cached: every call queries the
    filesystem again.

    Args:
        bases: Priority-ordered base directories (``str`` entries are parsed
            with the native grammar)
        fs: Filesystem capability used for existence checks
        logger: Structured logger for resolution events (defaults to the
            process-wide logger from :func:`default_logger`)
    """

    def __init__(
        self,
        bases: Iterable[PathLike] = (),
        *,
        fs: Optional[FileSystem] = None,
        logger: Optional[StructuredLogger] = None,
    ) -> None:
        self._bases: Tuple[Path, ...] = tuple(_as_path(b) for b in bases)
        self._fs = fs
        self._logger = logger if logger is not None else default_logger()

    @classmethod
    def from_env(
        cls,
        *,
        fs: Optional[FileSystem] = None,
        logger: Optional[StructuredLogger] = None,
    ) -> "Resolver":
        """Build a resolver from ``DP_RESOLVER_PATH``."""
        return cls(resolver_search_path(), fs=fs, logger=logger)

    @property
    def bases(self) -> Tuple[Path, ...]:
        return self._bases

    @property
    def logger(self) -> StructuredLogger:
        return self._logger

    def appended(self, base: PathLike) -> "Resolver":
        """Return a resolver that tries ``base`` after the current bases."""
        return Resolver(self._bases + (_as_path(base),), fs=self._fs, logger=self._logger)

    def prepended(self, base: PathLike) -> "Resolver":
        """Return a resolver that tries ``base`` before the current bases."""
        return Resolver((_as_path(base),) + self._bases, fs=self._fs, logger=self._logger)

    def resolve(self, candidate: PathLike) -> Path:
        """Return the first existing ``base / candidate``, else ``candidate``.

        Raises:
            PathArgumentError: If ``candidate`` is absolute or its kind differs
                from a base's kind
        """
        if isinstance(candidate, str):
            kind = self._bases[0].kind if self._bases else PathKind.NATIVE
            candidate = Path.parse(candidate, kind)
        fs = get_filesystem(self._fs)
        for base in self._bases:
            joined = base.join(candidate)
            if joined.exists(fs=fs):
                self.logger.debug("resolve.hit", candidate=candidate, resolved=joined)
                return joined
        self.logger.debug("resolve.miss", candidate=candidate, tried=len(self._bases))
        return candidate

    def __len__(self) -> int:
        return len(self._bases)

    @overload
    def __getitem__(self, index: int) -> Path: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[Path, ...]: ...

    def __getitem__(self, index):
        return self._bases[index]

    def __iter__(self) -> Iterator[Path]:
        return iter(self._bases)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Resolver):
            return NotImplemented
        return self._bases == other._bases

    def __str__(self) -> str:
        lines = ["resolver["]
        for i, base in enumerate(self._bases):
            sep = "," if i + 1 < len(self._bases) else ""
            lines.append(f'  "{base.render(base.kind)}"{sep}')
        lines.append("]")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Resolver({list(self._bases)!r})"


_default_loggers: Dict[_defaults.Settings, StructuredLogger] = {}


def default_logger() -> StructuredLogger:
    """Return the shared "resolver" logger for the current settings.

    One logger (and so one log file handle) exists per settings value, however
    many resolvers are built.
    """
    settings = _defaults.settings
    logger = _default_loggers.get(settings)
    if logger is None:
        logger = _default_loggers[settings] = create_logger("resolver")
    return logger


def _as_path(value: PathLike) -> Path:
    if isinstance(value, Path):
        return value
    return Path.parse(value, PathKind.NATIVE)


__all__ = ["Resolver", "default_logger"]
