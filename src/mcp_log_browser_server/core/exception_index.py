"""Exception dump discovery and listing metadata."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from bs4 import BeautifulSoup

from .catalog import list_files
from .config import EXCEPTION_SUFFIX
from .models import ExceptionRecord

logger = logging.getLogger(__name__)

TIMESTAMP_PREFIX_LEN = 12
TIMESTAMP_FORMAT = "%Y%m%d%H%M"


def parse_exception_timestamp(filename: str) -> datetime | None:
    """Parse the YYYYMMDDHHmm prefix of an exception filename."""
    prefix = filename[:TIMESTAMP_PREFIX_LEN]
    # strptime accepts single-digit fields, so require the full digit prefix first.
    if len(prefix) != TIMESTAMP_PREFIX_LEN or not (prefix.isascii() and prefix.isdigit()):
        return None
    try:
        return datetime.strptime(prefix, TIMESTAMP_FORMAT)
    except ValueError:
        return None


def strip_tags(text: str) -> str:
    """Return the text content of an HTML fragment."""
    if not text:
        return ""
    return BeautifulSoup(text, "html.parser").get_text()


def first_line(content: str) -> str:
    """Return the first non-empty line (leading newlines are skipped)."""
    return content.lstrip("\n").split("\n", 1)[0]


def _excerpt(path: Path) -> str:
    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.warning("Could not read exception file %s: %s", path, e)
        return ""
    return strip_tags(first_line(content))


def _sort_key(record: ExceptionRecord) -> datetime:
    # Undated records sort as the earliest.
    return record.date or datetime.min


def list_exceptions(root: str | Path) -> list[ExceptionRecord]:
    """List exception dumps under root, most recent first.

    Records with equal dates keep discovery order.
    """
    records = [
        ExceptionRecord(
            name=str(path),
            identifier=path.name,
            date=parse_exception_timestamp(path.name),
            excerpt=_excerpt(path),
        )
        for path in list_files(root, EXCEPTION_SUFFIX)
    ]
    # sorted() stays stable with reverse=True.
    return sorted(records, key=_sort_key, reverse=True)
