"""
Shared test fixtures for ao-core tests.
"""

import json
from pathlib import Path

import pytest

from ao_core.core import config as config_module
from ao_core.core.config import Config, configure_logging


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user config and $AO_CORE_CONFIG out of tests, and reset logging."""
    monkeypatch.setattr(config_module, "USER_CONFIG", tmp_path / "no-user-config")
    monkeypatch.delenv(config_module.ENV_CONFIG, raising=False)
    yield
    configure_logging(Config())


@pytest.fixture
def jsonl_file(tmp_path):
    """Factory for JSON-Lines files. Dicts are serialized, strings written raw."""

    def _make(*lines: dict | str, name: str = "session.jsonl", newline: bool = True) -> Path:
        parts = [json.dumps(line) if isinstance(line, dict) else line for line in lines]
        text = "\n".join(parts)
        if newline and parts:
            text += "\n"
        path = tmp_path / name
        path.write_bytes(text.encode("utf-8"))
        return path

    return _make


def read_log(path: Path) -> list[dict]:
    """Parse a JSON-Lines diagnostic log into a list of events."""
    return [json.loads(line) for line in path.read_text().splitlines() if line.strip()]
