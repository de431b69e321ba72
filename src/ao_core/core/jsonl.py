"""Bounded tail reads of append-only JSON-Lines logs.

Agent session logs grow without limit, so only the trailing
TAIL_READ_BYTES of a file are ever read. The first line of that window
is usually a fragment of a record that began before it; fragments and
any other unparseable line are skipped rather than reported.
"""

from __future__ import annotations

import asyncio
import json
import os
from dataclasses import dataclass
from datetime import datetime, timezone

from ao_core.core.config import log_event

TAIL_READ_BYTES = 4096


@dataclass(frozen=True)
class TailEntry:
    """Last record type seen in a log, with the log's modification time."""

    last_type: str | None
    """The `type` of the last record carrying one, or None if none was found."""

    modified_at: datetime
    """File mtime, timezone-aware UTC."""


def _entry_type(line: str) -> str | None:
    """Return the string `type` of a JSON object line, or None."""
    try:
        parsed = json.loads(line)
    except (ValueError, RecursionError):
        return None
    if not isinstance(parsed, dict):
        return None
    entry_type = parsed.get("type")
    return entry_type if isinstance(entry_type, str) else None


def read_last_jsonl_entry(path: str | os.PathLike) -> TailEntry | None:
    """Read the last typed entry from a JSON-Lines file.

    Reads at most TAIL_READ_BYTES from the end of the file and walks the
    lines backwards until one parses as an object with a string `type`.

    Returns None when the file is missing, unreadable or empty. Returns a
    TailEntry with last_type None when the window holds no typed entry.
    """
    try:
        with open(path, "rb") as f:
            stat = os.fstat(f.fileno())
            size = stat.st_size
            if size == 0:
                log_event("debug", "tail_empty", path=str(path))
                return None

            read_size = min(TAIL_READ_BYTES, size)
            f.seek(size - read_size)
            chunk = f.read(read_size).decode("utf-8", errors="replace")
    except (OSError, ValueError) as e:
        log_event("debug", "tail_unavailable", path=str(path), error=str(e))
        return None

    modified_at = datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc)

    for line in reversed(chunk.split("\n")):
        trimmed = line.strip()
        if not trimmed:
            continue
        entry_type = _entry_type(trimmed)
        if entry_type is not None:
            log_event("debug", "tail_entry", path=str(path), type=entry_type)
            return TailEntry(entry_type, modified_at)

    log_event("debug", "tail_no_entry", path=str(path), window=read_size)
    return TailEntry(None, modified_at)


async def aread_last_jsonl_entry(path: str | os.PathLike) -> TailEntry | None:
    """Async form of read_last_jsonl_entry, run in a worker thread."""
    return await asyncio.to_thread(read_last_jsonl_entry, path)
