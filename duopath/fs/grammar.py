"""Pure string parsing and rendering for POSIX and Windows path grammars.

No filesystem I/O is performed by any function in this module. ``Path`` keeps
its state as already-split components; this module converts between those
components and plain strings.

Key functions:
- parse_components: Split a raw string into segments, absoluteness and drive
- render_components: Join components back into a string for a target grammar
- validate_segment: Check a single component before it enters a Path

Windows rules:
- ``/`` and ``\\`` are both separators
- a leading ``\\\\?\\`` long-path prefix is stripped on parse and added back on
  render when the result would exceed the legacy length limit
- ``X:`` (ASCII letter + colon) at the start marks an absolute path; the drive
  letter is kept apart from the segments
"""

from __future__ import annotations

import re
from typing import Iterable, NamedTuple, Tuple

from ._types import PathKind
from .errors import PathArgumentError

LONG_PATH_PREFIX = "\\\\?\\"

# MAX_PATH, including the terminating NUL
WINDOWS_LEGACY_MAX_PATH = 260

_SEPARATORS = {
    PathKind.POSIX: "/",
    PathKind.WINDOWS: "/\\",
}

_SPLIT_RE = {
    PathKind.POSIX: re.compile(r"/+"),
    PathKind.WINDOWS: re.compile(r"[/\\]+"),
}


class Components(NamedTuple):
    """Structured form of a parsed path string."""

    segments: Tuple[str, ...]
    absolute: bool
    drive: str = ""


def separators(kind: PathKind) -> str:
    """Return every character treated as a separator by ``kind``."""
    return _SEPARATORS[kind.resolve()]


def primary_separator(kind: PathKind) -> str:
    """Return the separator used when rendering for ``kind``."""
    return "\\" if kind.resolve() is PathKind.WINDOWS else "/"


def strip_long_path_prefix(raw: str) -> str:
    if raw.startswith(LONG_PATH_PREFIX):
        return raw[len(LONG_PATH_PREFIX):]
    return raw


def split_segments(raw: str, kind: PathKind) -> Tuple[str, ...]:
    """Split ``raw`` on the separators of ``kind``, dropping empty pieces."""
    return tuple(part for part in _SPLIT_RE[kind.resolve()].split(raw) if part)


def _has_drive(raw: str) -> bool:
    return len(raw) >= 2 and raw[0].isascii() and raw[0].isalpha() and raw[1] == ":"


def parse_components(raw: str, kind: PathKind = PathKind.NATIVE) -> Components:
    """Parse a raw path string using the grammar of ``kind``.

    Args:
        raw: Any string; malformed input never raises
        kind: Grammar to apply (``NATIVE`` follows the host)

    Returns:
        Components with non-empty segments, the absolute flag and, for
        absolute Windows paths, the upper-cased drive letter.
    """
    kind = kind.resolve()
    if kind is PathKind.WINDOWS:
        raw = strip_long_path_prefix(raw)
        if _has_drive(raw):
            return Components(split_segments(raw[2:], kind), True, raw[0].upper())
        return Components(split_segments(raw, kind), False)
    return Components(split_segments(raw, kind), raw.startswith("/"))


def render_components(
    segments: Iterable[str],
    absolute: bool,
    drive: str = "",
    target: PathKind = PathKind.NATIVE,
    *,
    max_path: int = WINDOWS_LEGACY_MAX_PATH,
) -> str:
    """Render components as a string in the grammar of ``target``.

    Absolute POSIX output is prefixed with ``/``. Absolute Windows output is
    prefixed with ``<drive>:\\`` (or a bare ``\\`` when no drive is known) and,
    when it carries a drive and its UTF-8 length plus NUL exceeds ``max_path``,
    with the long-path prefix.
    """
    target = target.resolve()
    body = primary_separator(target).join(segments)
    if not absolute:
        return body
    if target is PathKind.POSIX:
        return "/" + body
    if not drive:
        return "\\" + body
    rendered = f"{drive}:\\{body}"
    if len(rendered.encode("utf-8")) + 1 > max_path:
        rendered = LONG_PATH_PREFIX + rendered
    return rendered


def validate_segment(segment: str, kind: PathKind) -> str:
    """Return ``segment`` unchanged if it can be stored as a single component.

    Raises:
        PathArgumentError: If the segment is not a string, is empty or contains
            a separator of ``kind``
    """
    if not isinstance(segment, str):
        raise PathArgumentError(f"segment must be a string, got {type(segment).__name__}")
    if not segment:
        raise PathArgumentError("segment cannot be empty")
    if any(sep in segment for sep in separators(kind)):
        raise PathArgumentError(f"segment cannot contain path separators: {segment!r}")
    return segment


def normalize_drive(drive: str) -> str:
    """Validate and upper-case a Windows drive letter (``""`` allowed)."""
    if not drive:
        return ""
    letter = drive[:-1] if drive.endswith(":") else drive
    if len(letter) != 1 or not (letter.isascii() and letter.isalpha()):
        raise PathArgumentError(f"invalid drive letter: {drive!r}")
    return letter.upper()


__all__ = [
    "LONG_PATH_PREFIX",
    "WINDOWS_LEGACY_MAX_PATH",
    "Components",
    "separators",
    "primary_separator",
    "strip_long_path_prefix",
    "split_segments",
    "parse_components",
    "render_components",
    "validate_segment",
    "normalize_drive",
]
