"""Command-line front end for the ao-core primitives.

Subcommands:
    quote ARG...               print ARGS as one shell-quoted command line
    applescript TEXT           print TEXT escaped for an AppleScript literal
    check-url URL [--label L]  exit 1 with a message if URL is not http(s)
    tail PATH                  print the last typed entry of a JSON-Lines log

Exit codes:
- 0: Success.
- 1: URL rejected, or no usable log (tail printed null).
- 2: Usage or config error.
"""

from __future__ import annotations

import argparse
import json
import sys

from ao_core import __version__
from ao_core.core.applescript import escape_applescript
from ao_core.core.bash import shell_join
from ao_core.core.config import configure_logging, load_config, log_event
from ao_core.core.jsonl import read_last_jsonl_entry
from ao_core.core.urls import InvalidUrlError, validate_url


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ao-core", description="Shared agent-orchestrator plugin utilities."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    quote = sub.add_parser("quote", help="quote arguments for a POSIX shell")
    quote.add_argument("args", nargs="*")

    applescript = sub.add_parser("applescript", help="escape text for AppleScript")
    applescript.add_argument("text")

    check_url = sub.add_parser("check-url", help="require an http(s) URL")
    check_url.add_argument("url")
    check_url.add_argument("--label", default="ao-core")

    tail = sub.add_parser("tail", help="show the last typed entry of a JSONL log")
    tail.add_argument("path")

    return parser


def _cmd_tail(path: str) -> int:
    entry = read_last_jsonl_entry(path)
    if entry is None:
        print("null")
        return 1
    print(json.dumps({
        "lastType": entry.last_type,
        "modifiedAt": entry.modified_at.isoformat(),
    }))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        configure_logging(load_config())
    except (ValueError, OSError) as e:
        print(f"ao-core: config error: {e}", file=sys.stderr)
        return 2

    log_event("debug", "command", command=args.command)

    if args.command == "quote":
        print(shell_join(args.args))
        return 0

    if args.command == "applescript":
        print(escape_applescript(args.text))
        return 0

    if args.command == "check-url":
        try:
            validate_url(args.url, args.label)
        except InvalidUrlError as e:
            print(e, file=sys.stderr)
            return 1
        return 0

    return _cmd_tail(args.path)
