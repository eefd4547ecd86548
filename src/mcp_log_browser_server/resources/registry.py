"""MCP resource registry.

Resources are addressable by URI and can be fetched by the MCP client on demand.
File resources are resolved under the configured roots only.
"""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP

from mcp_log_browser_server.core import log_service
from mcp_log_browser_server.core.config import (
    EXCEPTION_DIR_ENV,
    EXCEPTION_SUFFIX,
    LOG_DIR_ENV,
    LOG_SUFFIX,
    BrowserConfig,
)
from mcp_log_browser_server.tools.models import FlashMessage


def help_text(cfg: BrowserConfig) -> str:
    """Return a short list of available resource URIs."""
    return (
        "Resources:\n"
        "- app://log-browser/help\n"
        "- app://log-browser/schemas/flash-message\n"
        f"- log://{{filename}} ({LOG_SUFFIX} files under {LOG_DIR_ENV})\n"
        f"- exception://{{filename}} ({EXCEPTION_SUFFIX} files under {EXCEPTION_DIR_ENV})\n"
        f"\nLog directory: {cfg.log_root}\n"
        f"Exception directory: {cfg.exception_root}\n"
    )


async def read_log_resource(cfg: BrowserConfig, filename: str) -> str:
    """Read a log file under the log root."""
    content = await log_service.aread_log(cfg, filename)
    if content is None:
        raise FileNotFoundError(f"Logfile not found: {filename}")
    return content


async def read_exception_resource(cfg: BrowserConfig, filename: str) -> str:
    """Read an exception dump under the exception root."""
    content = await log_service.aread_exception(cfg, filename)
    if content is None:
        raise FileNotFoundError(f"Exception not found: {filename}")
    return content


def register_resources(mcp: FastMCP) -> None:
    """Register resource handlers on the MCP server."""

    @mcp.resource("app://log-browser/help")
    def help_resource() -> str:
        return help_text(BrowserConfig.from_env())

    @mcp.resource("app://log-browser/schemas/flash-message")
    def flash_message_schema() -> dict[str, Any]:
        """Return the JSON schema for flash messages attached to tool results."""
        return FlashMessage.model_json_schema()

    @mcp.resource("log://{filename}")
    async def log_file(filename: str) -> str:
        """Return the raw contents of a log file."""
        return await read_log_resource(BrowserConfig.from_env(), filename)

    @mcp.resource("exception://{filename}")
    async def exception_file(filename: str) -> str:
        """Return the raw contents of an exception dump."""
        return await read_exception_resource(BrowserConfig.from_env(), filename)
