"""Unit tests for the command-line entry point."""

from unittest.mock import patch

import pytest

from v0_bridge.__main__ import build_parser, main, settings_from_args


def test_flags_override_environment(monkeypatch):
    """Test that given flags win over V0_BRIDGE_* variables."""
    monkeypatch.setenv("V0_BRIDGE_MAX_TOOL_ROUNDS", "5")
    monkeypatch.setenv("V0_BRIDGE_TURN_TIMEOUT_SECONDS", "30")

    args = build_parser().parse_args(["--max-tool-rounds", "2", "--turn-timeout-seconds", "7.5"])
    settings = settings_from_args(args)

    assert settings.max_tool_rounds == 2
    assert settings.turn_timeout_seconds == 7.5


def test_missing_flags_fall_back_to_environment(monkeypatch):
    """Test that omitted flags leave environment values in place."""
    monkeypatch.setenv("V0_BRIDGE_TURN_TIMEOUT_SECONDS", "30")
    monkeypatch.setenv("V0_BRIDGE_MODEL", "qwen2.5:7b")

    settings = settings_from_args(build_parser().parse_args(["--port", "9001"]))

    assert settings.port == 9001
    assert settings.turn_timeout_seconds == 30.0
    assert settings.model == "qwen2.5:7b"


def test_invalid_log_level_rejected():
    """Test that unknown log levels are refused by the parser."""
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--log-level", "LOUD"])


def test_main_runs_uvicorn_with_settings():
    """Test that main hands the configured app and bind address to uvicorn."""
    with patch("v0_bridge.__main__.uvicorn.run") as mock_run:
        main(["--host", "0.0.0.0", "--port", "9100", "--log-level", "WARNING"])

    mock_run.assert_called_once()
    app = mock_run.call_args.args[0]
    assert app.state.settings.port == 9100
    assert mock_run.call_args.kwargs == {"host": "0.0.0.0", "port": 9100, "log_level": "warning"}
