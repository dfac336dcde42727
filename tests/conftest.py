# tests/conftest.py
# Isolate DP_* settings from the developer environment and provide fakes.

from __future__ import annotations

import io
import json

import pytest

from duopath.config import defaults
from duopath.fs._types import PathKind
from duopath.logging import StructuredLogger

from tests.fakes.fake_filesystem import FakeFileSystem


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Run every test with default settings, whatever DP_* the shell exports."""
    monkeypatch.setattr(
        defaults,
        "settings",
        defaults.Settings(
            windows_max_path=260,
            filesystem="",
            log_dir="",
            log_console=False,
            log_level="info",
            log_max_size_mb=0,
        ),
    )
    monkeypatch.delenv("DP_RESOLVER_PATH", raising=False)


@pytest.fixture
def posix_fs() -> FakeFileSystem:
    return FakeFileSystem(PathKind.POSIX)


@pytest.fixture
def windows_fs() -> FakeFileSystem:
    return FakeFileSystem(PathKind.WINDOWS)


class CapturedLog:
    """StructuredLogger writing to memory, with parsed access to entries."""

    def __init__(self) -> None:
        self.stream = io.StringIO()
        self.logger = StructuredLogger(
            "test",
            session_id="t",
            output_file=self.stream,
            enable_console=False,
            min_level="debug",
        )

    @property
    def entries(self) -> list[dict]:
        return [json.loads(line) for line in self.stream.getvalue().splitlines() if line]

    def messages(self) -> list[str]:
        return [e["message"] for e in self.entries]


@pytest.fixture
def captured_log() -> CapturedLog:
    return CapturedLog()
