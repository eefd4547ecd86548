"""Log line parser.

Lines look like::

    2024-01-02 10:00:00 42 12:00:00.1 ERROR Disk full
    <date>              <pid> <time>  <level> <message>

The secondary time token is optional. The grammar is LOG_LINE_RE applied to the whole
file content, so a date token may start with the newline that ended the previous line;
it is trimmed before it is stored.

LOG_LINE_RE backtracks quadratically over long runs of date characters (separator
lines, blank lines), so matches are found with a scanner that gives the same groups:
for each run of date characters it tries the split points from the right, which is
the order the greedy date group would, and abandons a run once every split has failed.
"""

from __future__ import annotations

import html
import re
import string
from collections.abc import Iterator

from .models import LogEntry, ParsedLog

LOG_LINE_RE = re.compile(r"([\d:\-\s]+)\s(\d+)(\s+[:.\d]+)?\s+(\w+)\s+(.+)", re.ASCII)

_DATE_RUN_RE = re.compile(r"[\d:\-\s]+", re.ASCII)
# Everything after the process id. Its first character is always whitespace.
_TAIL_RE = re.compile(r"(\s+[:.\d]+)?\s+(\w+)\s+(.+)", re.ASCII)

_SPACE = frozenset(string.whitespace)
_DIGITS = frozenset(string.digits)

LineGroups = tuple[str, str, str | None, str, str]


def _split_at(content: str, e: int) -> tuple[str, re.Match[str]] | None:
    """Match `\\s(\\d+)` + tail with the date group ending at e."""
    if content[e] not in _SPACE:
        return None
    q = e + 1
    n = len(content)
    while q < n and content[q] in _DIGITS:
        q += 1
    if q == e + 1:
        return None
    # A shorter pid would leave a digit where the tail needs whitespace.
    tail = _TAIL_RE.match(content, q)
    if tail is None:
        return None
    return content[e + 1 : q], tail


def iter_line_matches(content: str) -> Iterator[LineGroups]:
    """Yield the five LOG_LINE_RE groups for each match, in order, in linear time."""
    pos = 0
    while True:
        run = _DATE_RUN_RE.search(content, pos)
        if run is None:
            return
        start, end = run.span()

        for e in range(end - 1, start, -1):
            found = _split_at(content, e)
            if found is not None:
                break
        else:
            pos = end
            continue

        pid, tail = found
        yield content[start:e], pid, tail.group(1), tail.group(2), tail.group(3)
        pos = tail.end()


def parse_log(content: str, level: str = "") -> ParsedLog:
    """Parse log content into entries, keeping only `level` when it is set.

    Every matched level is collected into `levels` regardless of the filter, so callers
    can offer the complete set as filter choices.
    """
    entries: list[LogEntry] = []
    seen: dict[str, None] = {}

    for date, pid, source, line_level, message in iter_line_matches(content):
        seen.setdefault(line_level, None)

        if level and line_level != level:
            continue

        entries.append(
            LogEntry(
                date=date.strip(),
                source=(source or "").strip(),
                level=line_level,
                message=html.escape(message),
                process_id=pid,
            )
        )

    return ParsedLog(entries=entries, levels=list(seen))
