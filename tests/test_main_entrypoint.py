"""
Tests for main.py - Main Entry Point

Tests for the main entry point including:
- Logging configuration
- Container and app creation
- Server startup
- Error handling
- Graceful shutdown
"""

import json
import logging
from unittest.mock import MagicMock, mock_open, patch

import pytest

from party_dj.main import _LOGGING_CONFIG_PATH, cli, main, setup_logging


class TestLoggingSetup:
    """Tests for logging configuration."""

    def _make_valid_config(self) -> dict:
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "handlers": {},
            "loggers": {
                "aiosqlite": {"level": "WARNING"},
                "httpx": {"level": "WARNING"},
            },
            "root": {"level": "INFO", "handlers": []},
        }

    def test_dictconfig_called_when_json_exists(self):
        config = self._make_valid_config()
        m = mock_open(read_data=json.dumps(config))
        with (
            patch("builtins.open", m),
            patch("logging.config.dictConfig") as mock_dc,
        ):
            setup_logging()

            mock_dc.assert_called_once_with(config)

    def test_fallback_to_basicconfig_when_json_missing(self):
        with (
            patch("builtins.open", side_effect=FileNotFoundError),
            patch("logging.basicConfig") as mock_bc,
        ):
            setup_logging()

            mock_bc.assert_called_once()

    def test_fallback_to_basicconfig_when_json_malformed(self):
        m = mock_open(read_data="{invalid json")
        with (
            patch("builtins.open", m),
            patch("logging.basicConfig") as mock_bc,
        ):
            setup_logging()

            mock_bc.assert_called_once()

    def test_root_logger_level_overridden_by_settings(self):
        m = mock_open(read_data=json.dumps(self._make_valid_config()))
        with (
            patch("builtins.open", m),
            patch("logging.config.dictConfig"),
            patch("logging.getLogger") as mock_get_logger,
        ):
            mock_root = MagicMock()
            mock_get_logger.return_value = mock_root

            setup_logging("DEBUG")

            mock_root.setLevel.assert_called_once_with(logging.DEBUG)

    def test_shipped_config_is_valid(self):
        """The repository's logging_config.json should load and use ColoredFormatter."""
        config = json.loads(_LOGGING_CONFIG_PATH.read_text())

        assert config["formatters"]["console"]["()"] == "party_dj.utils.logging.ColoredFormatter"
        for name in ("aiosqlite", "httpx"):
            assert config["loggers"][name]["level"] == "WARNING"


def _mock_settings(environment: str = "test") -> MagicMock:
    settings = MagicMock()
    settings.log_level = "INFO"
    settings.environment = environment
    settings.server.host = "127.0.0.1"
    settings.server.port = 8080
    return settings


class TestMainFunction:
    """Tests for main entry point function."""

    def _run(self, settings, run_side_effect=None):
        app = MagicMock()
        with (
            patch("party_dj.config.settings.get_settings", return_value=settings),
            patch("party_dj.main.setup_logging") as mock_setup,
            patch("party_dj.config.container.create_container") as mock_create_container,
            patch("party_dj.infrastructure.web.app.create_app", return_value=app) as mock_app,
            patch("uvicorn.run", side_effect=run_side_effect) as mock_run,
        ):
            exit_code = main()
        return exit_code, mock_setup, mock_create_container, mock_app, mock_run, app

    def test_main_successful_run(self):
        settings = _mock_settings()

        exit_code, mock_setup, mock_create_container, mock_app, mock_run, app = self._run(settings)

        assert exit_code == 0
        mock_setup.assert_called_once_with("INFO")
        mock_create_container.assert_called_once_with(settings)
        mock_app.assert_called_once_with(mock_create_container.return_value)
        mock_run.assert_called_once_with(app, host="127.0.0.1", port=8080, log_config=None)

    def test_main_handles_keyboard_interrupt(self):
        exit_code, *_ = self._run(_mock_settings(), run_side_effect=KeyboardInterrupt())

        assert exit_code == 0

    def test_main_handles_exception(self):
        exit_code, *_ = self._run(_mock_settings(), run_side_effect=RuntimeError("port in use"))

        assert exit_code == 1

    def test_main_logs_startup_messages(self, caplog):
        with caplog.at_level(logging.INFO, logger="party_dj.main"):
            self._run(_mock_settings("production"))

        assert "environment=production" in caplog.text
        assert "127.0.0.1:8080" in caplog.text


class TestCli:
    def test_cli_exits_with_main_code(self):
        with patch("party_dj.main.main", return_value=1), pytest.raises(SystemExit) as exc_info:
            cli()

        assert exc_info.value.code == 1
