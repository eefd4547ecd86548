"""MCP server entrypoint (stdio transport).

This module wires together:
- Tools: list, show and delete actions over the configured log/exception roots
- Resources: raw file contents via log:// and exception:// URIs
- Prompts: reusable conversation templates that clients can invoke

Run locally (stdio):
    python -m mcp_log_browser_server.server.log_server
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from mcp_log_browser_server.core.config import BrowserConfig
from mcp_log_browser_server.prompts.registry import register_prompts
from mcp_log_browser_server.resources.registry import register_resources
from mcp_log_browser_server.tools.browse import (
    delete_exception_impl,
    list_files_impl,
    show_exception_impl,
    show_log_impl,
)

LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Configure a reasonable default logging setup.

    stdout carries the MCP transport, so logs go to stderr.
    """
    level_name = os.getenv("LOG_BROWSER_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


mcp = FastMCP("log-browser", json_response=True)

register_resources(mcp)
register_prompts(mcp)


@mcp.tool()
def list_files() -> dict[str, Any]:
    """List log files and exception dumps.

    Returns
    -------
    dict:
        {"log_files": [{"name", "identifier"}],
         "exceptions": [{"name", "identifier", "date", "excerpt"}]}
        Exceptions are ordered most recent first; date is ISO-8601 or null.
    """
    return list_files_impl(cfg=BrowserConfig.from_env())


@mcp.tool()
def show_log(filename: str, level: str = "") -> dict[str, Any]:
    """Return parsed entries of a log file.

    Parameters
    ----------
    filename:
        Log file name relative to the log directory (e.g., "System_Development.log").
    level:
        Only return entries with exactly this level (e.g., "ERROR"). Empty means all.

    Returns
    -------
    dict:
        {"found": bool, "entries": list[dict], "levels": list[str], "flash_messages": list[dict]}
        `levels` lists every level in the file, independent of the filter.
    """
    return show_log_impl(cfg=BrowserConfig.from_env(), filename=filename, level=level)


@mcp.tool()
def show_exception(filename: str) -> dict[str, Any]:
    """Return the HTML-escaped content of an exception dump."""
    return show_exception_impl(cfg=BrowserConfig.from_env(), filename=filename)


@mcp.tool()
def delete_exception(filename: str) -> dict[str, Any]:
    """Delete an exception dump.

    Returns
    -------
    dict:
        {"found": bool, "deleted": bool, "flash_messages": list[dict]}
    """
    return delete_exception_impl(cfg=BrowserConfig.from_env(), filename=filename)


def main(argv: Sequence[str] | None = None) -> None:
    """Start the MCP server over stdio."""
    _configure_logging()
    cfg = BrowserConfig.from_env()
    LOGGER.debug(
        "Starting MCP server (transport=stdio, logs=%s, exceptions=%s)",
        cfg.log_root,
        cfg.exception_root,
    )
    _ = argv or sys.argv[1:]
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
