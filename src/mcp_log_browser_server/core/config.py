"""Browser configuration.

Roots are read once into a frozen config and passed explicitly into each core call.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

LOG_DIR_ENV = "LOG_BROWSER_LOG_DIR"
EXCEPTION_DIR_ENV = "LOG_BROWSER_EXCEPTION_DIR"

DEFAULT_LOG_DIR = Path("Data") / "Logs"
DEFAULT_EXCEPTION_DIR = DEFAULT_LOG_DIR / "Exceptions"

# File suffixes are fixed policy.
LOG_SUFFIX = ".log"
EXCEPTION_SUFFIX = ".txt"

EXCEPTION_NOT_FOUND_TEXT = "Error: Exception not found"


@dataclass(frozen=True, slots=True)
class BrowserConfig:
    """Filesystem roots for log files and exception dumps."""

    log_root: Path
    exception_root: Path

    @classmethod
    def from_env(cls) -> BrowserConfig:
        """Build a config from LOG_BROWSER_* env vars (relative defaults resolve against cwd)."""
        log_root = os.getenv(LOG_DIR_ENV) or str(Path.cwd() / DEFAULT_LOG_DIR)
        exception_root = os.getenv(EXCEPTION_DIR_ENV) or str(Path.cwd() / DEFAULT_EXCEPTION_DIR)
        return cls.from_paths(log_root, exception_root)

    @classmethod
    def from_paths(cls, log_root: str | Path, exception_root: str | Path) -> BrowserConfig:
        """Build a config from explicit paths."""
        if not str(log_root).strip():
            raise ValueError(f"{LOG_DIR_ENV} must not be empty")
        if not str(exception_root).strip():
            raise ValueError(f"{EXCEPTION_DIR_ENV} must not be empty")
        return cls(
            log_root=Path(log_root).expanduser(),
            exception_root=Path(exception_root).expanduser(),
        )
