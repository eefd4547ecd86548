"""Recursive file discovery under a configured root."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .config import LOG_SUFFIX
from .models import FileRef

logger = logging.getLogger(__name__)


def _raise(err: OSError) -> None:
    raise err


def list_files(root: str | Path, suffix: str) -> list[Path]:
    """Return files under root whose name ends with suffix, in traversal order.

    A missing or unreadable tree yields an empty list.
    """
    base = Path(root)
    if not base.is_dir():
        logger.warning("Directory not found: %s", base)
        return []

    out: list[Path] = []
    try:
        for dirpath, _dirnames, filenames in os.walk(base, onerror=_raise):
            for name in filenames:
                if not name.endswith(suffix):
                    continue
                path = Path(dirpath) / name
                if path.is_file():
                    out.append(path)
    except OSError as e:
        logger.warning("Could not read directory %s: %s", base, e)
        return []

    return out


def list_logs(root: str | Path) -> list[FileRef]:
    """List .log files under root, keyed by basename."""
    return [FileRef(name=p.name, identifier=p.name) for p in list_files(root, LOG_SUFFIX)]
