"""Core data models for log and exception browsing."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True, slots=True)
class FileRef:
    """A discovered file addressed by its basename."""

    name: str
    identifier: str


@dataclass(frozen=True, slots=True)
class LogEntry:
    """One matched log line."""

    date: str
    source: str  # secondary time token, "" when the line has none
    level: str
    message: str  # HTML-escaped
    process_id: str = ""


@dataclass(frozen=True, slots=True)
class ParsedLog:
    """Parser output: filtered entries plus every level seen (first-seen order)."""

    entries: list[LogEntry]
    levels: list[str]


@dataclass(frozen=True, slots=True)
class ExceptionRecord:
    """Listing metadata for a single exception dump."""

    name: str  # full discovered path
    identifier: str
    date: datetime | None  # None when the filename has no YYYYMMDDHHmm prefix
    excerpt: str


@dataclass(frozen=True, slots=True)
class LogView:
    """Result of showing a log file."""

    filename: str
    level: str
    found: bool
    entries: list[LogEntry] = field(default_factory=list)
    levels: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class ExceptionView:
    """Result of showing an exception file; content is always HTML-escaped."""

    filename: str
    found: bool
    content: str


@dataclass(frozen=True, slots=True)
class DeleteOutcome:
    """found=False means the path was rejected; deleted reports the unlink result."""

    found: bool
    deleted: bool
