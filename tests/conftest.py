from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from mcp_log_browser_server.core.config import BrowserConfig


@pytest.fixture
def log_lines() -> list[str]:
    return [
        "2024-01-02 10:00:00 42 12:00:00.1 INFO Service started",
        "2024-01-02 10:00:01 42 12:00:01.2 ERROR Disk full",
        "2024-01-02 10:00:02 43              WARNING Cache <miss> & retry",
        "not a log line",
        "2024-01-02 10:00:03 42 12:00:03.4 ERROR Disk still full",
    ]


@pytest.fixture
def roots(tmp_path: Path) -> BrowserConfig:
    logs = tmp_path / "Logs"
    exceptions = logs / "Exceptions"
    exceptions.mkdir(parents=True)
    return BrowserConfig(log_root=logs, exception_root=exceptions)


@pytest.fixture
def write_log(log_lines: list[str]) -> Callable[[Path], Path]:
    def _write(path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(log_lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_exception() -> Callable[[Path, str], Path]:
    def _write(path: Path, content: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
