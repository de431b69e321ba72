"""Shell quoting utilities for building command lines from untrusted values."""

from __future__ import annotations

from collections.abc import Iterable


def shell_escape(arg: str) -> str:
    """Quote a string as a single POSIX shell word.

    Always single-quotes, even plain words, so the result is exactly one
    token. Embedded single quotes close the quoted segment, emit an escaped
    quote and reopen it: ' becomes '\\''. Returns '' for empty strings.

    Safe for both `sh -c` command lines and direct-exec argument lists.
    """
    return "'" + arg.replace("'", "'\\''") + "'"


def shell_join(args: Iterable[str]) -> str:
    """Join arguments into a shell command line with every word quoted."""
    return " ".join(shell_escape(a) for a in args)
