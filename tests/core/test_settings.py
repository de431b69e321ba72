"""Tests for ao-core settings and logging setup."""

from pathlib import Path

import pytest

from ao_core.core import config as config_module
from ao_core.core.config import (
    Config,
    configure_logging,
    load_config,
    log_event,
    parse_config,
)
from conftest import read_log


class TestParseConfig:
    def test_empty(self):
        assert parse_config("") == Config()

    def test_comments_and_blank_lines(self):
        assert parse_config("# a comment\n\n   \n") == Config()

    def test_log_path(self):
        config = parse_config("set log /tmp/ao.log")
        assert config.log == Path("/tmp/ao.log")

    def test_log_path_expands_tilde(self):
        config = parse_config("set log ~/ao.log")
        assert config.log == Path.home() / "ao.log"

    def test_verbose(self):
        assert parse_config("set verbose").verbose is True

    def test_case_insensitive_directive(self):
        assert parse_config("SET VERBOSE").verbose is True

    def test_unknown_directive(self):
        with pytest.raises(ValueError, match="line 2: unknown directive 'allow'"):
            parse_config("set verbose\nallow git")

    def test_unknown_setting(self):
        with pytest.raises(ValueError, match="unknown setting 'color'"):
            parse_config("set color")

    def test_set_requires_name(self):
        with pytest.raises(ValueError, match="'set' requires a setting name"):
            parse_config("set")

    def test_log_requires_path(self):
        with pytest.raises(ValueError, match="'log' requires a path"):
            parse_config("set log")

    def test_verbose_takes_no_value(self):
        with pytest.raises(ValueError, match="'verbose' takes no value"):
            parse_config("set verbose yes")


class TestLoadConfig:
    def test_defaults_when_no_files(self):
        assert load_config() == Config()

    def test_user_config(self, tmp_path, monkeypatch):
        user = tmp_path / "user-config"
        user.write_text("set verbose\n")
        monkeypatch.setattr(config_module, "USER_CONFIG", user)
        assert load_config() == Config(verbose=True)

    def test_env_overrides_user(self, tmp_path, monkeypatch):
        user = tmp_path / "user-config"
        user.write_text("set log /tmp/user.log\nset verbose\n")
        env = tmp_path / "env-config"
        env.write_text("set log /tmp/env.log\n")
        monkeypatch.setattr(config_module, "USER_CONFIG", user)
        monkeypatch.setenv(config_module.ENV_CONFIG, str(env))
        assert load_config() == Config(log=Path("/tmp/env.log"), verbose=True)

    def test_missing_env_file_ignored(self, tmp_path, monkeypatch):
        monkeypatch.setenv(config_module.ENV_CONFIG, str(tmp_path / "missing"))
        assert load_config() == Config()


class TestLogging:
    def test_noop_when_unconfigured(self, tmp_path):
        log_event("info", "ignored", x=1)
        assert list(tmp_path.iterdir()) == []

    def test_writes_json_lines(self, tmp_path):
        log_path = tmp_path / "logs" / "ao.log"
        configure_logging(Config(log=log_path))
        log_event("info", "first", n=1)
        log_event("warning", "second")
        events = read_log(log_path)
        assert [e["event"] for e in events] == ["first", "second"]
        assert [e["level"] for e in events] == ["info", "warning"]
        assert events[0]["n"] == 1
        assert all("ts" in e for e in events)

    def test_debug_requires_verbose(self, tmp_path):
        log_path = tmp_path / "ao.log"
        configure_logging(Config(log=log_path))
        log_event("debug", "hidden")
        configure_logging(Config(log=log_path, verbose=True))
        log_event("debug", "shown")
        assert [e["event"] for e in read_log(log_path)] == ["shown"]

    def test_disable(self, tmp_path):
        log_path = tmp_path / "ao.log"
        configure_logging(Config(log=log_path))
        configure_logging(Config())
        log_event("info", "dropped")
        assert read_log(log_path) == []
