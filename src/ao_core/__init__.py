"""
ao-core - shared utilities for agent-orchestrator plugins.

Quoting for shell and AppleScript interpolation, a URL scheme guard,
and bounded tail reads of JSON-Lines activity logs.
"""

from __future__ import annotations

__version__ = "0.1.0"

from ao_core.core.applescript import escape_applescript
from ao_core.core.bash import shell_escape, shell_join
from ao_core.core.jsonl import (
    TAIL_READ_BYTES,
    TailEntry,
    aread_last_jsonl_entry,
    read_last_jsonl_entry,
)
from ao_core.core.urls import InvalidUrlError, validate_url

__all__ = [
    "InvalidUrlError",
    "TAIL_READ_BYTES",
    "TailEntry",
    "__version__",
    "aread_last_jsonl_entry",
    "escape_applescript",
    "read_last_jsonl_entry",
    "shell_escape",
    "shell_join",
    "validate_url",
]
