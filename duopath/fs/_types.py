from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum


class PathKind(Enum):
	"""Path grammar used for parsing and rendering.

	``NATIVE`` is a placeholder that resolves to whichever of ``POSIX`` or
	``WINDOWS`` matches the running host.
	"""

	POSIX = "posix"
	WINDOWS = "windows"
	NATIVE = "native"

	def resolve(self) -> "PathKind":
		if self is PathKind.NATIVE:
			return PathKind.WINDOWS if os.name == "nt" else PathKind.POSIX
		return self


@dataclass(frozen=True, slots=True)
class StatResult:
	"""Subset of filesystem metadata consumed by Path queries."""

	is_dir: bool
	is_file: bool
	size: int
