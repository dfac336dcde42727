"""Path utilities for configurable resolver search locations."""

from __future__ import annotations

import os
from typing import Tuple

from ..fs._types import PathKind
from ..fs.path import Path

_RESOLVER_PATH_ENV = "DP_RESOLVER_PATH"


def resolver_search_path(raw: str | None = None) -> Tuple[Path, ...]:
    """Return the configured resolver bases as native Paths.

    Reads ``DP_RESOLVER_PATH`` unless ``raw`` is given. Entries are separated
    by ``os.pathsep``; blank entries are skipped and a leading ``~`` expands to
    the user's home directory. Order is preserved.
    """
    if raw is None:
        raw = os.getenv(_RESOLVER_PATH_ENV, "")
    bases = []
    for entry in raw.split(os.pathsep):
        entry = entry.strip()
        if not entry:
            continue
        bases.append(Path.parse(os.path.expanduser(entry), PathKind.NATIVE))
    return tuple(bases)


__all__ = ["resolver_search_path"]
