"""MCP tool implementations.

This module contains the *implementation* behind the exposed MCP tools.
Keep this layer thin: translate arguments into core calls, turn outcomes into
flash messages, and return JSON-serializable data structures.
"""

from __future__ import annotations

from typing import Any

from mcp_log_browser_server.core import log_service
from mcp_log_browser_server.core.config import BrowserConfig
from mcp_log_browser_server.core.models import ExceptionRecord, FileRef, LogEntry
from mcp_log_browser_server.tools.models import FlashMessage, error, ok


def _file_to_dict(ref: FileRef) -> dict[str, Any]:
    return {"name": ref.name, "identifier": ref.identifier}


def _exception_to_dict(record: ExceptionRecord) -> dict[str, Any]:
    """Convert an ExceptionRecord into a JSON-serializable dict."""
    return {
        "name": record.name,
        "identifier": record.identifier,
        "date": record.date.isoformat() if record.date is not None else None,
        "excerpt": record.excerpt,
    }


def _entry_to_dict(entry: LogEntry) -> dict[str, Any]:
    """Convert a LogEntry into a JSON-serializable dict."""
    return {
        "date": entry.date,
        "source": entry.source,
        "level": entry.level,
        "message": entry.message,
    }


def _messages(*messages: FlashMessage) -> list[dict[str, Any]]:
    return [m.model_dump() for m in messages]


def list_files_impl(*, cfg: BrowserConfig) -> dict[str, Any]:
    """Implementation for the `list_files` MCP tool (log files plus exceptions)."""
    return {
        "log_files": [_file_to_dict(f) for f in log_service.list_logs(cfg)],
        "exceptions": [_exception_to_dict(r) for r in log_service.list_exceptions(cfg)],
    }


def show_log_impl(*, cfg: BrowserConfig, filename: str, level: str | None = None) -> dict[str, Any]:
    """Implementation for the `show_log` MCP tool."""
    view = log_service.show_log(cfg, filename, level or "")
    flash = [] if view.found else [error("Logfile could not be read")]
    return {
        "filename": view.filename,
        "level": view.level,
        "found": view.found,
        "count": len(view.entries),
        "entries": [_entry_to_dict(e) for e in view.entries],
        "levels": list(view.levels),
        "flash_messages": _messages(*flash),
    }


def show_exception_impl(*, cfg: BrowserConfig, filename: str) -> dict[str, Any]:
    """Implementation for the `show_exception` MCP tool."""
    view = log_service.show_exception(cfg, filename)
    return {
        "filename": view.filename,
        "found": view.found,
        "content": view.content,
        "flash_messages": [],
    }


def delete_exception_impl(*, cfg: BrowserConfig, filename: str) -> dict[str, Any]:
    """Implementation for the `delete_exception` MCP tool.

    Notes
    -----
    Not found, deleted and failed-to-delete produce distinct flash messages.
    """
    outcome = log_service.delete_exception(cfg, filename)
    if not outcome.found:
        flash = error(f"Exception {filename} not found")
    elif outcome.deleted:
        flash = ok(f"Exception {filename} deleted")
    else:
        flash = error(f"Exception {filename} could not be deleted")
    return {
        "filename": filename,
        "found": outcome.found,
        "deleted": outcome.deleted,
        "flash_messages": _messages(flash),
    }
