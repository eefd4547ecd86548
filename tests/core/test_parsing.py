from __future__ import annotations

import time

import pytest

from mcp_log_browser_server.core.models import LogEntry
from mcp_log_browser_server.core.parsing import LOG_LINE_RE, iter_line_matches, parse_log


def test_parse_single_line() -> None:
    parsed = parse_log("2024-01-02 10:00:00 42 12:00:00.1 ERROR Disk full\n")

    assert parsed.levels == ["ERROR"]
    assert parsed.entries == [
        LogEntry(
            date="2024-01-02 10:00:00",
            source="12:00:00.1",
            level="ERROR",
            message="Disk full",
            process_id="42",
        )
    ]


def test_parse_preserves_order_and_skips_unmatched(log_lines: list[str]) -> None:
    parsed = parse_log("\n".join(log_lines))

    assert [e.level for e in parsed.entries] == ["INFO", "ERROR", "WARNING", "ERROR"]
    assert [e.date for e in parsed.entries] == [
        "2024-01-02 10:00:00",
        "2024-01-02 10:00:01",
        "2024-01-02 10:00:02",
        "2024-01-02 10:00:03",
    ]
    assert parsed.levels == ["INFO", "ERROR", "WARNING"]


def test_optional_secondary_time_token(log_lines: list[str]) -> None:
    parsed = parse_log(log_lines[2])

    (entry,) = parsed.entries
    assert entry.source == ""
    assert entry.process_id == "43"
    assert entry.level == "WARNING"


def test_message_is_html_escaped(log_lines: list[str]) -> None:
    parsed = parse_log(log_lines[2])

    assert parsed.entries[0].message == "Cache &lt;miss&gt; &amp; retry"


def test_quotes_are_escaped() -> None:
    parsed = parse_log("2024-01-02 10:00:00 1 INFO said \"hi\" and 'bye'")

    assert parsed.entries[0].message == "said &quot;hi&quot; and &#x27;bye&#x27;"


def test_level_filter_is_subsequence_and_levels_unfiltered(log_lines: list[str]) -> None:
    content = "\n".join(log_lines)
    full = parse_log(content)
    errors = parse_log(content, "ERROR")

    assert [e.message for e in errors.entries] == ["Disk full", "Disk still full"]
    assert all(e.level == "ERROR" for e in errors.entries)
    assert all(e in full.entries for e in errors.entries)
    assert errors.levels == full.levels


def test_filter_is_exact_match(log_lines: list[str]) -> None:
    parsed = parse_log("\n".join(log_lines), "error")

    assert parsed.entries == []
    assert parsed.levels == ["INFO", "ERROR", "WARNING"]


def test_parse_is_idempotent(log_lines: list[str]) -> None:
    content = "\n".join(log_lines)

    assert parse_log(content, "ERROR") == parse_log(content, "ERROR")


def test_empty_and_unmatched_content() -> None:
    assert parse_log("").entries == []
    assert parse_log("").levels == []
    assert parse_log("just some text\nmore text\n").entries == []


@pytest.mark.parametrize(
    "content",
    [
        "2024-01-02 10:00:00 42 12:00:00.1 ERROR Disk full",
        "2024-01-02 10:00:00 42 12:00:00.1 INFO a\n\n\n2024-01-02 10:00:01 43 WARN b\n",
        "1 2 3 4\n5 6 7 8\n",
        "--- 5 ---\n2024-01-02 10:00:00 7 DEBUG after separator\n---\n",
        "2024 1 21030 x\n12:00 3 4 5 6\n  \t 9  INFO   spaced   out  \n",
        "no digits here\n - - - \n 12 :34 ERROR x\n",
        "2024-01-02 10:00:00 42 12:00:00.1 ERROR\n2024-01-02 10:00:01 42 INFO next\n",
    ],
)
def test_scanner_agrees_with_grammar(content: str) -> None:
    expected = [m.groups() for m in LOG_LINE_RE.finditer(content)]

    assert list(iter_line_matches(content)) == expected


def test_separator_block_parses_quickly(log_lines: list[str]) -> None:
    separators = ("-" * 79 + "\n") * 3000

    started = time.perf_counter()
    empty = parse_log(separators)
    wrapped = parse_log("\n".join(log_lines) + "\n" + separators + "\n\n" * 2000)
    elapsed = time.perf_counter() - started

    assert empty.entries == []
    assert empty.levels == []
    assert len(wrapped.entries) == 4
    assert elapsed < 2


def test_non_ascii_digits_are_not_dates() -> None:
    parsed = parse_log("٢٠٢٤ ٤٢ INFO arabic digits")

    assert parsed.entries == []
    assert parsed.levels == []
