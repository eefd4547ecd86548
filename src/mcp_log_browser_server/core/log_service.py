"""Browsing operations over the configured log and exception roots.

This module is the integration point for presentation layers (MCP tools, CLI).
Every function takes a BrowserConfig and returns plain result objects; nothing
here raises for missing or rejected files.
"""

from __future__ import annotations

import html
import logging

from . import exception_store
from .catalog import list_logs as _list_logs
from .config import EXCEPTION_NOT_FOUND_TEXT, BrowserConfig
from .exception_index import list_exceptions as _list_exceptions
from .models import DeleteOutcome, ExceptionRecord, ExceptionView, FileRef, LogView
from .parsing import parse_log
from .paths import aread_under_root, read_under_root

logger = logging.getLogger(__name__)


def list_logs(cfg: BrowserConfig) -> list[FileRef]:
    """List log files under the log root."""
    return _list_logs(cfg.log_root)


def list_exceptions(cfg: BrowserConfig) -> list[ExceptionRecord]:
    """List exception dumps under the exception root, most recent first."""
    return _list_exceptions(cfg.exception_root)


def show_log(cfg: BrowserConfig, filename: str | None, level: str = "") -> LogView:
    """Parse a log file, optionally keeping only entries of `level`."""
    level = level or ""
    content = read_under_root(cfg.log_root, filename)
    if content is None:
        return LogView(filename=filename or "", level=level, found=False)

    parsed = parse_log(content, level)
    logger.debug(
        "Parsed %s: %d entries, levels=%s (filter=%r)",
        filename,
        len(parsed.entries),
        parsed.levels,
        level,
    )
    return LogView(
        filename=filename or "",
        level=level,
        found=True,
        entries=parsed.entries,
        levels=parsed.levels,
    )


def show_exception(cfg: BrowserConfig, filename: str | None) -> ExceptionView:
    """Return the escaped content of an exception dump, or the placeholder text."""
    content = exception_store.read_exception(cfg.exception_root, filename)
    found = content is not None
    if not found:
        content = EXCEPTION_NOT_FOUND_TEXT
    return ExceptionView(filename=filename or "", found=found, content=html.escape(content))


def delete_exception(cfg: BrowserConfig, filename: str | None) -> DeleteOutcome:
    """Delete an exception dump under the exception root."""
    return exception_store.delete_exception(cfg.exception_root, filename)


async def aread_log(cfg: BrowserConfig, filename: str | None) -> str | None:
    """Return the raw content of a log file (async), or None when not found."""
    return await aread_under_root(cfg.log_root, filename)


async def aread_exception(cfg: BrowserConfig, filename: str | None) -> str | None:
    """Return the raw content of an exception dump (async), or None when not found."""
    return await exception_store.aread_exception(cfg.exception_root, filename)
