"""ao-core settings and diagnostic logging."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import IO

import structlog

USER_CONFIG = Path.home() / ".ao-core" / "config"
ENV_CONFIG = "AO_CORE_CONFIG"


@dataclass
class Config:
    """Parsed configuration."""

    log: Path | None = None  # None = no logging
    verbose: bool = False  # emit debug-level events


# === Config Loading ===


def _merge_configs(base: Config, overlay: Config) -> Config:
    """Merge overlay config into base. Overlay wins where set."""
    return replace(
        base,
        log=overlay.log if overlay.log is not None else base.log,
        verbose=overlay.verbose if overlay.verbose else base.verbose,
    )


def load_config() -> Config:
    """Load config from ~/.ao-core/config, then $AO_CORE_CONFIG. Last value wins."""
    config = Config()

    if USER_CONFIG.is_file():
        config = _merge_configs(config, parse_config(USER_CONFIG.read_text()))

    env_path = os.environ.get(ENV_CONFIG)
    if env_path:
        env_config_path = Path(env_path).expanduser()
        if env_config_path.is_file():
            config = _merge_configs(config, parse_config(env_config_path.read_text()))

    return config


def parse_config(text: str) -> Config:
    """Parse config text into Config object. Raises ValueError on syntax errors."""
    settings: dict[str, bool | Path] = {}

    for lineno, raw_line in enumerate(text.splitlines(), 1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        parts = line.split(None, 1)
        directive = parts[0].lower()
        rest = parts[1].strip() if len(parts) > 1 else ""

        try:
            if directive == "set":
                _apply_setting(settings, rest)
            else:
                raise ValueError(f"unknown directive '{directive}'")
        except ValueError as e:
            raise ValueError(f"line {lineno}: {e}") from None

    return Config(
        log=settings.get("log"),
        verbose=settings.get("verbose", False),
    )


def _apply_setting(settings: dict[str, bool | Path], rest: str) -> None:
    """Parse and apply a 'set' directive. Raises ValueError on invalid setting."""
    if not rest:
        raise ValueError("'set' requires a setting name")

    parts = rest.split(None, 1)
    key = parts[0].lower()
    value = parts[1].strip() if len(parts) > 1 else None

    if key == "verbose":
        if value is not None:
            raise ValueError(f"'{key}' takes no value")
        settings["verbose"] = True

    elif key == "log":
        if value is None:
            raise ValueError("'log' requires a path")
        settings["log"] = Path(value).expanduser()

    else:
        raise ValueError(f"unknown setting '{key}'")


# === Logging ===

_logger: structlog.typing.FilteringBoundLogger | None = None
_log_file: IO[str] | None = None


def configure_logging(config: Config) -> None:
    """Configure logging based on config settings. Call once at startup.

    Events are written as one JSON object per line to ``config.log``.
    A config without a log path turns logging off again.
    """
    global _logger, _log_file
    if _log_file is not None:
        _log_file.close()
        _log_file = None

    if config.log is None:
        _logger = None
        return

    config.log.parent.mkdir(parents=True, exist_ok=True)
    _log_file = config.log.open("a", encoding="utf-8")

    level = logging.DEBUG if config.verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=_log_file),
        cache_logger_on_first_use=False,
    )
    _logger = structlog.get_logger()


def log_event(level: str, event: str, **fields) -> None:
    """Log an event. No-op if logging not configured."""
    if _logger is None:
        return
    try:
        getattr(_logger, level)(event, **fields)
    except Exception:
        pass  # Logging is optional - never fail the caller
