from __future__ import annotations

import errno
from typing import Dict, List, Tuple

from duopath.fs._types import PathKind, StatResult
from duopath.fs.path import Path

_Key = Tuple[str, Tuple[str, ...]]


class FakeFileSystem:
    """In-memory filesystem speaking either grammar.

    Entries are keyed by (drive, segments) of the absolute path, so the
    long-path prefix and mixed separators map to the same entry. Relative
    inputs are taken relative to ``cwd``.
    """

    def __init__(self, kind: PathKind = PathKind.POSIX, cwd: str | None = None) -> None:
        self.kind = kind.resolve()
        if cwd is None:
            cwd = "C:\\work" if self.kind is PathKind.WINDOWS else "/work"
        self.cwd = cwd
        self.dirs: set[_Key] = set()
        self.files: Dict[_Key, bytes] = {}
        self.readonly: set[_Key] = set()
        self.calls: List[Tuple[str, str]] = []
        self.getcwd_error: OSError | None = None
        self.add_dir(cwd)

    # ---------- Setup helpers ----------
    def _key(self, native: str) -> _Key:
        p = Path.parse(native, self.kind)
        if not p.is_absolute:
            p = Path.parse(self.cwd, self.kind).join(p)
        return (p.drive, p.segments)

    def add_dir(self, native: str) -> None:
        self.add_dir_key(self._key(native))

    def add_file(self, native: str, data: bytes = b"") -> None:
        drive, segments = self._key(native)
        self.add_dir_key((drive, segments[:-1]))
        self.files[(drive, segments)] = data

    def add_dir_key(self, key: _Key) -> None:
        drive, segments = key
        for i in range(len(segments) + 1):
            self.dirs.add((drive, segments[:i]))

    def make_readonly(self, native: str) -> None:
        self.readonly.add(self._key(native))

    def has_dir(self, native: str) -> bool:
        return self._key(native) in self.dirs

    # ---------- FileSystem protocol ----------
    def stat(self, native: str) -> StatResult:
        self.calls.append(("stat", native))
        key = self._key(native)
        if key in self.dirs:
            return StatResult(is_dir=True, is_file=False, size=0)
        if key in self.files:
            return StatResult(is_dir=False, is_file=True, size=len(self.files[key]))
        raise FileNotFoundError(errno.ENOENT, "No such file or directory", native)

    def mkdir(self, native: str) -> None:
        self.calls.append(("mkdir", native))
        key = self._key(native)
        drive, segments = key
        if key in self.dirs or key in self.files:
            raise FileExistsError(errno.EEXIST, "File exists", native)
        parent = (drive, segments[:-1])
        if parent not in self.dirs:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", native)
        if parent in self.readonly:
            raise PermissionError(errno.EACCES, "Permission denied", native)
        self.dirs.add(key)

    def remove(self, native: str) -> None:
        self.calls.append(("remove", native))
        key = self._key(native)
        if key not in self.files:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", native)
        del self.files[key]

    def truncate(self, native: str, length: int) -> None:
        self.calls.append(("truncate", native))
        key = self._key(native)
        if key not in self.files:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", native)
        data = self.files[key]
        self.files[key] = data[:length].ljust(length, b"\0")

    def canonicalize(self, native: str) -> str:
        self.calls.append(("canonicalize", native))
        key = self._key(native)
        if key not in self.dirs and key not in self.files:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", native)
        drive, segments = key
        return Path(segments, True, self.kind, drive).render(self.kind)

    def getcwd(self) -> str:
        if self.getcwd_error is not None:
            raise self.getcwd_error
        return self.cwd
