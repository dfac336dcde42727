"""Immutable path value type spanning POSIX and Windows grammars.

A ``Path`` stores its components, never its separators. Algebra (join,
parent, filename, extension) is purely lexical; filesystem queries render the
path with the grammar of a ``FileSystem`` capability and delegate to it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from ..config import defaults as _defaults
from ._types import PathKind
from .errors import PathArgumentError, PathNotFoundError, PathOSError
from .grammar import (
    normalize_drive,
    parse_components,
    render_components,
    validate_segment,
)
from .system import FileSystem, get_filesystem

PathLike = Union["Path", str]


@dataclass(frozen=True, slots=True)
class Path:
    """Structured, comparable filesystem path.

    Build one with :meth:`Path.parse` (any string is accepted) or directly from
    components. Equality is structural: ``kind``, ``is_absolute``, ``drive``
    and ``segments`` must all match, case-sensitively, and ``.``/``..`` are
    ordinary segments.

    Args:
        segments: Non-empty components without separators
        is_absolute: Whether the path is anchored at a root
        kind: Grammar of the path; ``NATIVE`` resolves to the host grammar
        drive: Drive letter of an absolute Windows path (``"C"`` or ``"C:"``)

    Raises:
        PathArgumentError: If a segment is empty or contains a separator, or
            the drive does not match absoluteness (absolute Windows paths need
            one, everything else must not have one)
    """

    segments: Tuple[str, ...] = ()
    is_absolute: bool = False
    kind: PathKind = PathKind.NATIVE
    drive: str = ""

    def __post_init__(self) -> None:
        kind = self.kind.resolve()
        if isinstance(self.segments, str):
            raise PathArgumentError("segments must be an iterable of components, not a str")
        segments = tuple(validate_segment(s, kind) for s in self.segments)
        drive = normalize_drive(self.drive)
        if kind is PathKind.WINDOWS and self.is_absolute and not drive:
            raise PathArgumentError("absolute Windows paths need a drive letter")
        if drive and not (kind is PathKind.WINDOWS and self.is_absolute):
            raise PathArgumentError("drive letters only apply to absolute Windows paths")
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "segments", segments)
        object.__setattr__(self, "is_absolute", bool(self.is_absolute))
        object.__setattr__(self, "drive", drive)

    # ---------- Construction ----------
    @classmethod
    def parse(cls, value: str, kind: PathKind = PathKind.NATIVE) -> "Path":
        """Parse ``value`` with the grammar of ``kind``. Never fails on content."""
        if not isinstance(value, str):
            raise PathArgumentError(f"expected str, got {type(value).__name__}")
        parsed = parse_components(value, kind)
        return cls(parsed.segments, parsed.absolute, kind, parsed.drive)

    @classmethod
    def from_segments(
        cls,
        segments: Iterable[str],
        kind: PathKind = PathKind.NATIVE,
        *,
        absolute: bool = False,
        drive: str = "",
    ) -> "Path":
        return cls(tuple(segments), absolute, kind, drive)

    def _with_segments(self, segments: Tuple[str, ...]) -> "Path":
        return Path(segments, self.is_absolute, self.kind, self.drive)

    def _coerce(self, other: PathLike) -> "Path":
        if isinstance(other, Path):
            return other
        if isinstance(other, str):
            return Path.parse(other, self.kind)
        raise PathArgumentError(f"expected Path or str, got {type(other).__name__}")

    # ---------- Algebra ----------
    def join(self, other: PathLike) -> "Path":
        """Append the segments of a relative path of the same kind.

        Raises:
            PathArgumentError: If ``other`` is absolute or of another kind
        """
        other = self._coerce(other)
        if other.is_absolute:
            raise PathArgumentError(f"join(): expected a relative path, got {other!r}")
        if other.kind is not self.kind:
            raise PathArgumentError(
                f"join(): expected a {self.kind.value} path, got {other.kind.value}"
            )
        return self._with_segments(self.segments + other.segments)

    def __truediv__(self, other: PathLike) -> "Path":
        if not isinstance(other, (Path, str)):
            return NotImplemented
        return self.join(other)

    def parent(self) -> "Path":
        """Return the lexical parent.

        An empty relative path yields ``..``; an empty absolute path is its own
        parent. Existing ``..`` segments are not collapsed.
        """
        if not self.segments:
            if self.is_absolute:
                return self
            return self._with_segments(("..",))
        return self._with_segments(self.segments[:-1])

    @property
    def filename(self) -> str:
        return self.segments[-1] if self.segments else ""

    @property
    def extension(self) -> str:
        """Text after the last ``.`` of the filename, or ``""``."""
        name = self.filename
        pos = name.rfind(".")
        if pos <= 0:
            # no dot, or a lone leading dot (".gitignore")
            return ""
        return name[pos + 1:]

    @property
    def is_empty(self) -> bool:
        return not self.segments

    # ---------- Serialization ----------
    def render(self, target: PathKind = PathKind.NATIVE) -> str:
        """Render the path as a string in the grammar of ``target``."""
        return render_components(
            self.segments,
            self.is_absolute,
            self.drive,
            target,
            max_path=_defaults.settings.windows_max_path,
        )

    def __str__(self) -> str:
        return self.render(PathKind.NATIVE)

    def __fspath__(self) -> str:
        return self.render(PathKind.NATIVE)

    def __repr__(self) -> str:
        return f"Path({self.render(self.kind)!r}, kind={self.kind.value})"

    # ---------- Filesystem queries ----------
    def _stat(self, fs: FileSystem):
        return fs.stat(self.render(fs.kind))

    def exists(self, *, fs: FileSystem | None = None) -> bool:
        try:
            self._stat(get_filesystem(fs))
        except (OSError, ValueError):
            return False
        return True

    def is_file(self, *, fs: FileSystem | None = None) -> bool:
        try:
            return self._stat(get_filesystem(fs)).is_file
        except (OSError, ValueError):
            return False

    def is_directory(self, *, fs: FileSystem | None = None) -> bool:
        try:
            return self._stat(get_filesystem(fs)).is_dir
        except (OSError, ValueError):
            return False

    def size(self, *, fs: FileSystem | None = None) -> int:
        """Return the file size in bytes.

        Raises:
            PathNotFoundError: If the path cannot be stat'ed for any reason
        """
        fs = get_filesystem(fs)
        native = self.render(fs.kind)
        try:
            return fs.stat(native).size
        except OSError as exc:
            message = f'size(): cannot stat file "{native}"'
            raise PathNotFoundError.from_os_error(exc, message, native) from exc
        except ValueError as exc:
            raise PathNotFoundError(f'size(): cannot stat file "{native}": {exc}') from exc

    def absolutize(self, *, fs: FileSystem | None = None) -> "Path":
        """Ask the OS for the canonical absolute form of this path.

        The result is parsed with the capability's grammar.

        Raises:
            PathOSError: If the OS call fails (missing path, permissions)
        """
        fs = get_filesystem(fs)
        native = self.render(fs.kind)
        try:
            canonical = fs.canonicalize(native)
        except OSError as exc:
            raise PathOSError.from_os_error(exc, "absolutize(): canonicalization failed", native) from exc
        except ValueError as exc:
            raise PathOSError(f"absolutize(): canonicalization failed: {exc}") from exc
        return Path.parse(canonical, fs.kind)


__all__ = ["Path", "PathLike"]
