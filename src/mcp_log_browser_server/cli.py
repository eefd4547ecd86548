from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from mcp_log_browser_server.core import log_service
from mcp_log_browser_server.core.config import BrowserConfig


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Browse log files and exception dumps.")
    p.add_argument("--log-dir", default=None, help="Log directory (default: $LOG_BROWSER_LOG_DIR)")
    p.add_argument(
        "--exception-dir",
        default=None,
        help="Exception directory (default: $LOG_BROWSER_EXCEPTION_DIR)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")

    sub = p.add_subparsers(dest="command", required=True)
    sub.add_parser("logs", help="List log files")
    sub.add_parser("exceptions", help="List exceptions, most recent first")

    show_log = sub.add_parser("show-log", help="Print parsed entries of a log file")
    show_log.add_argument("filename")
    show_log.add_argument("--level", default="", help="Only entries with exactly this level")

    show_exc = sub.add_parser("show-exception", help="Print an exception dump")
    show_exc.add_argument("filename")

    delete_exc = sub.add_parser("delete-exception", help="Delete an exception dump")
    delete_exc.add_argument("filename")
    return p


def _resolve_config(args: argparse.Namespace) -> BrowserConfig:
    env = BrowserConfig.from_env()
    return BrowserConfig.from_paths(
        args.log_dir or env.log_root,
        args.exception_dir or env.exception_root,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entrypoint for local use (the MCP server is `python -m mcp_log_browser_server`)."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = _resolve_config(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.command == "logs":
        for ref in log_service.list_logs(cfg):
            print(ref.identifier)
        return 0

    if args.command == "exceptions":
        for rec in log_service.list_exceptions(cfg):
            ts = rec.date.isoformat(sep=" ", timespec="minutes") if rec.date else "-"
            print(f"{ts} {rec.identifier} {rec.excerpt}")
        return 0

    if args.command == "show-log":
        view = log_service.show_log(cfg, args.filename, args.level)
        if not view.found:
            print("Logfile could not be read", file=sys.stderr)
            return 2
        for e in view.entries:
            print(f"{e.date} [{e.level}] {e.message}")
        print(f"\n{len(view.entries)} entries. Levels: {', '.join(view.levels) or '-'}")
        return 0

    if args.command == "show-exception":
        view = log_service.show_exception(cfg, args.filename)
        if not view.found:
            print(f"Exception {args.filename} not found", file=sys.stderr)
            return 2
        print(view.content)
        return 0

    outcome = log_service.delete_exception(cfg, args.filename)
    if not outcome.found:
        print(f"Exception {args.filename} not found", file=sys.stderr)
        return 2
    if not outcome.deleted:
        print(f"Exception {args.filename} could not be deleted", file=sys.stderr)
        return 2
    print(f"Exception {args.filename} deleted")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
