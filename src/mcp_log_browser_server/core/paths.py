"""Path containment checks and guarded reads for user-supplied filenames."""

from __future__ import annotations

import logging
from pathlib import Path

import aiofiles

logger = logging.getLogger(__name__)

TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "replace"


def resolve_under_root(root: str | Path, relative_name: str | None) -> Path | None:
    """Resolve a filename under root, or return None if it is not a file inside root.

    The name is appended as a string (root + "/" + name), so a leading slash stays
    under root rather than replacing it. Symlinks are followed before the containment
    check.
    """
    if not relative_name:
        return None

    try:
        base = Path(root).resolve()
        target = Path(f"{root}/{relative_name}").resolve()
        if base not in target.parents:
            logger.warning("Rejected path outside root: root=%s name=%r", root, relative_name)
            return None
        if not target.is_file():
            logger.debug("Requested file does not exist: %s", target)
            return None
    except (OSError, ValueError, RuntimeError) as e:
        logger.warning("Could not resolve %r under %s: %s", relative_name, root, e)
        return None

    return target


def read_under_root(root: str | Path, relative_name: str | None) -> str | None:
    """Return the text of root/relative_name, or None if rejected or unreadable."""
    path = resolve_under_root(root, relative_name)
    if path is None:
        return None
    try:
        return path.read_text(encoding=TEXT_ENCODING, errors=TEXT_ERRORS)
    except OSError as e:
        logger.warning("Could not read %s: %s", path, e)
        return None


async def aread_under_root(root: str | Path, relative_name: str | None) -> str | None:
    """Async variant of read_under_root."""
    path = resolve_under_root(root, relative_name)
    if path is None:
        return None
    try:
        async with aiofiles.open(path, encoding=TEXT_ENCODING, errors=TEXT_ERRORS) as f:
            return await f.read()
    except OSError as e:
        logger.warning("Could not read %s: %s", path, e)
        return None
