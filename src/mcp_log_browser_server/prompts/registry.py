"""MCP prompt registry.

Prompts are predefined conversation/workflow templates that the client can invoke explicitly.
"""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP


def review_exception_messages(filename: str) -> list[dict[str, Any]]:
    """Build a prompt that explains a single exception dump."""
    return [
        {
            "role": "system",
            "content": (
                "You are a senior backend engineer reviewing application exception dumps. "
                "Be concise and evidence-based. Do not invent stack frames or details."
            ),
        },
        {
            "role": "user",
            "content": (
                f"Call show_exception with filename={filename!r}. If found is false, say the "
                "exception no longer exists and suggest calling list_files.\n\n"
                "Return this structure:\n"
                "1) Exception type and message (1 line)\n"
                "2) Where it was thrown (file/line if present)\n"
                "3) Likely cause (1-2 sentences; say 'Unknown' if unclear)\n"
                "4) Next actions (2-4 bullets)\n"
            ),
        },
        {
            "role": "user",
            "content": [
                {"type": "text", "text": "Raw dump:"},
                {"type": "resource", "uri": f"exception://{filename}"},
            ],
        },
    ]


def summarize_log_messages(filename: str, level: str = "") -> list[dict[str, Any]]:
    """Build a prompt that summarizes a log file, optionally for a single level."""
    call = f"filename={filename!r}"
    if level:
        call += f", level={level!r}"
    return [
        {
            "role": "system",
            "content": (
                "You are an incident triage assistant. Summarize log data from tool output only; "
                "if the evidence is insufficient, say so."
            ),
        },
        {
            "role": "user",
            "content": (
                f"Call show_log with {call}.\n"
                "- If found is false, report that the logfile could not be read.\n"
                "- Use the returned levels list to mention which other levels exist.\n"
                "- Quote 2-5 entries as evidence (date, level, message).\n"
                "- End with 2-4 next actions.\n"
            ),
        },
    ]


def register_prompts(mcp: FastMCP) -> None:
    """Register prompt templates on the MCP server."""

    @mcp.prompt()
    def review_exception(filename: str) -> list[dict[str, Any]]:
        """Build a prompt that explains a single exception dump."""
        return review_exception_messages(filename)

    @mcp.prompt()
    def summarize_log(filename: str, level: str = "") -> list[dict[str, Any]]:
        """Build a prompt that summarizes a log file."""
        return summarize_log_messages(filename, level)
