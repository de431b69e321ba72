"""AppleScript string literal escaping."""

from __future__ import annotations


def escape_applescript(s: str) -> str:
    """Escape a string for interpolation inside AppleScript double quotes.

    The caller supplies the surrounding quotes. Backslashes must be
    doubled before quotes are escaped.
    """
    return s.replace("\\", "\\\\").replace('"', '\\"')
