"""Tests for configuration loading and the command-line entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import cli
from common.config import (
    ENV_API_KEY,
    ENV_LANGUAGE,
    ENV_LOCATION,
    ENV_LOG_FILE,
    ENV_LOG_LEVEL,
    ENV_POLL_MINUTES,
    ENV_UNITS,
    Config,
)
from common.logging_setup import setup_logging

ALL_ENV = (
    ENV_API_KEY,
    ENV_LANGUAGE,
    ENV_LOCATION,
    ENV_LOG_FILE,
    ENV_LOG_LEVEL,
    ENV_POLL_MINUTES,
    ENV_UNITS,
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ALL_ENV:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults():
    config = Config()
    assert config.location == "Berlin, DE"
    assert config.units == "imperial"
    assert config.language == "en"
    assert config.api_key is None
    assert config.poll_interval_minutes == 10
    assert config.mouse_capture is True
    config.validate()


def test_from_env_empty_keeps_defaults():
    assert Config.from_env({}) == Config()


def test_from_env_reads_all_fields():
    config = Config.from_env(
        {
            ENV_LOCATION: "Oslo, NO",
            ENV_UNITS: "metric",
            ENV_LANGUAGE: "no",
            ENV_API_KEY: "k3y",
            ENV_POLL_MINUTES: "5",
            ENV_LOG_LEVEL: "DEBUG",
            ENV_LOG_FILE: "/tmp/weather-tabs.log",
        }
    )
    assert config.location == "Oslo, NO"
    assert config.units == "metric"
    assert config.language == "no"
    assert config.api_key == "k3y"
    assert config.poll_interval_minutes == 5
    assert config.log_level == "DEBUG"
    assert config.log_file == "/tmp/weather-tabs.log"


def test_from_env_empty_api_key_is_none():
    assert Config.from_env({ENV_API_KEY: ""}).api_key is None


@pytest.mark.parametrize(
    "env",
    [
        {ENV_UNITS: "kelvin"},
        {ENV_POLL_MINUTES: "ten"},
        {ENV_POLL_MINUTES: "0"},
        {ENV_LOCATION: "   "},
    ],
)
def test_from_env_rejects_bad_values(env):
    with pytest.raises(ValueError):
        Config.from_env(env)


def test_cli_flags_override_environment(clean_env):
    clean_env.setenv(ENV_LOCATION, "Oslo, NO")
    clean_env.setenv(ENV_API_KEY, "from-env")
    args = cli.build_parser().parse_args(
        ["--units", "metric", "--api-key", "from-flag", "--poll-minutes", "2", "--no-mouse"]
    )

    config = cli.load_config(args)

    assert config.location == "Oslo, NO"
    assert config.units == "metric"
    assert config.api_key == "from-flag"
    assert config.poll_interval_minutes == 2
    assert config.mouse_capture is False


def test_cli_main_runs_dashboard(clean_env):
    with patch("cli.run_dashboard") as run, patch("cli.setup_logging") as logs:
        cli.main(["--location", "Rome, IT", "--log-level", "debug"])

    config = run.call_args[0][0]
    assert config.location == "Rome, IT"
    assert config.log_level == "DEBUG"
    logs.assert_called_once_with(level="DEBUG", log_file=None)


def test_cli_main_swallows_keyboard_interrupt(clean_env):
    with patch("cli.run_dashboard", side_effect=KeyboardInterrupt), patch("cli.setup_logging"):
        cli.main([])


def test_cli_main_reraises_errors(clean_env):
    with patch("cli.run_dashboard", side_effect=OSError("no tty")), patch("cli.setup_logging"):
        with pytest.raises(OSError):
            cli.main([])


def test_cli_main_rejects_bad_poll_interval(clean_env):
    with patch("cli.run_dashboard") as run, patch("cli.setup_logging"):
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["--poll-minutes", "0"])

    assert excinfo.value.code == 2
    run.assert_not_called()


def test_setup_logging_writes_to_file(tmp_path):
    log_file = tmp_path / "dashboard.log"
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        root.handlers[:] = []
        setup_logging(level="INFO", log_file=str(log_file))
        logging.getLogger("weather.source").info("fetched")
        for handler in root.handlers:
            handler.flush()
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)

    line = log_file.read_text(encoding="utf-8").strip()
    assert "| INFO     | weather.source | fetched" in line


def test_setup_logging_without_file_discards(tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        root.handlers[:] = []
        setup_logging(level="WARNING")
        assert all(isinstance(h, logging.NullHandler) for h in root.handlers)
        assert root.level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_config_module_holds_no_shared_instance():
    import common.config as config_module

    assert not any(isinstance(value, Config) for value in vars(config_module).values())
