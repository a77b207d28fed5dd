"""Tests for the logger module."""

import logging
from unittest.mock import patch

import pytest

import libvndb.logger as logger_module
from libvndb.logger import _LEVELS, Logger, get_logger, setup_global_logging
from libvndb.settings import settings


class TestSetupGlobalLogging:
    """Tests for setup_global_logging function."""

    @pytest.mark.parametrize(
        "level,expected",
        [
            ("INFO", logging.INFO),
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("INVALID", logging.INFO),
        ],
    )
    def test_levels(self, monkeypatch, level, expected):
        monkeypatch.setattr(logger_module, "_configured", False)

        with patch("logging.basicConfig") as mock_basicconfig:
            setup_global_logging(level=level)
            mock_basicconfig.assert_called_once()
            args, kwargs = mock_basicconfig.call_args
            assert kwargs["level"] == expected

    def test_idempotent(self, monkeypatch):
        """Test that setup_global_logging only configures once."""
        monkeypatch.setattr(logger_module, "_configured", True)

        with patch("logging.basicConfig") as mock_basicconfig:
            setup_global_logging()
            mock_basicconfig.assert_not_called()


class TestLogger:
    """Tests for Logger and get_logger."""

    @pytest.fixture
    def logger(self, monkeypatch):
        monkeypatch.setattr(logger_module, "_configured", False)

        with patch("logging.basicConfig"):
            return Logger("libvndb.test")

    def test_get_logger_with_name(self, monkeypatch):
        monkeypatch.setattr(logger_module, "_configured", False)

        with patch("logging.basicConfig"):
            logger = get_logger("libvndb.client")
            assert isinstance(logger, Logger)
            assert logger.name == "libvndb.client"

    def test_initialization_configures_from_settings(self, monkeypatch):
        monkeypatch.setattr(logger_module, "_configured", False)

        with patch.object(settings, "LOG_LEVEL", "DEBUG"):
            with patch("libvndb.logger.setup_global_logging") as mock_setup:
                Logger("test")
                mock_setup.assert_called_once_with("DEBUG")

    @pytest.mark.parametrize("method", ["debug", "info", "error", "exception"])
    def test_level_methods_delegate(self, logger, method):
        with patch.object(logger._logger, method) as mock_method:
            getattr(logger, method)("Request %s", "failed", exc_info=True)
            mock_method.assert_called_once_with("Request %s", "failed", exc_info=True)

    def test_message_debug_level(self, logger):
        with patch.object(settings, "LOG_LEVEL", "debug"):
            with patch.object(logger, "debug") as mock_debug:
                logger.message("Test message")
                mock_debug.assert_called_once_with("Test message")

    @pytest.mark.parametrize("level", ["INFO", ""])
    def test_message_info_level(self, logger, level):
        with patch.object(settings, "LOG_LEVEL", level):
            with patch.object(logger, "info") as mock_info:
                logger.message("Test message")
                mock_info.assert_called_once_with("Test message")

    def test_message_warning_level(self, logger):
        with patch.object(settings, "LOG_LEVEL", "WARNING"):
            with patch.object(logger._logger, "log") as mock_log:
                logger.message("Test message")
                args, kwargs = mock_log.call_args
                assert args[0] == logging.WARNING

    def test_levels_mapping(self):
        assert _LEVELS == {
            "CRITICAL": logging.CRITICAL,
            "ERROR": logging.ERROR,
            "WARNING": logging.WARNING,
            "INFO": logging.INFO,
            "DEBUG": logging.DEBUG,
        }
