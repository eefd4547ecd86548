"""Read and delete operations on a single exception dump."""

from __future__ import annotations

import logging
from pathlib import Path

from .models import DeleteOutcome
from .paths import aread_under_root, read_under_root, resolve_under_root

logger = logging.getLogger(__name__)


def read_exception(root: str | Path, identifier: str | None) -> str | None:
    """Return the raw content of an exception dump, or None when not found."""
    return read_under_root(root, identifier)


async def aread_exception(root: str | Path, identifier: str | None) -> str | None:
    """Async variant of read_exception."""
    return await aread_under_root(root, identifier)


def delete_exception(root: str | Path, identifier: str | None) -> DeleteOutcome:
    """Delete an exception dump.

    A rejected path reports found=False. A failed unlink reports found=True,
    deleted=False so callers can tell the two apart.
    """
    path = resolve_under_root(root, identifier)
    if path is None:
        return DeleteOutcome(found=False, deleted=False)

    try:
        path.unlink()
    except OSError as e:
        logger.error("Could not delete exception %s: %s", path, e)
        return DeleteOutcome(found=True, deleted=False)

    logger.info("Deleted exception %s", path)
    return DeleteOutcome(found=True, deleted=True)
