"""Tests for the centralized logging configuration module."""

import logging
from unittest.mock import Mock, patch

import pytest

from popo.utils.logging_config import (
    _setup_cli_logging,
    _setup_sdk_logging,
    is_logging_configured,
    reset_logging_config,
    setup_toolkit_logging,
)


def _clear_handlers(name=None):
    logger = logging.getLogger(name)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)


class TestSetupToolkitLogging:
    """Test the main setup_toolkit_logging function."""

    def setup_method(self):
        """Reset logging state before each test."""
        reset_logging_config()
        _clear_handlers("popo")

    def test_setup_cli_mode(self):
        with patch("popo.utils.logging_config._setup_cli_logging") as mock_cli:
            setup_toolkit_logging(mode="cli")
            mock_cli.assert_called_once()
            assert is_logging_configured()

    def test_setup_sdk_mode(self):
        with patch("popo.utils.logging_config._setup_sdk_logging") as mock_sdk:
            setup_toolkit_logging(mode="sdk")
            mock_sdk.assert_called_once()
            assert is_logging_configured()

    def test_duplicate_setup_prevention(self):
        with patch("popo.utils.logging_config._setup_sdk_logging") as mock_sdk:
            setup_toolkit_logging(mode="sdk")
            setup_toolkit_logging(mode="sdk")
            mock_sdk.assert_called_once()

    def test_cli_then_sdk_no_duplication(self):
        with patch("popo.utils.logging_config._setup_cli_logging"):
            setup_toolkit_logging(mode="cli")

        with patch("popo.utils.logging_config._setup_sdk_logging") as mock_sdk:
            setup_toolkit_logging(mode="sdk")
            mock_sdk.assert_not_called()

    def test_invalid_mode_raises_error(self):
        with pytest.raises(ValueError, match="Invalid logging mode: invalid"):
            setup_toolkit_logging(mode="invalid")

    def test_default_mode_is_sdk(self):
        with patch("popo.utils.logging_config._setup_sdk_logging") as mock_sdk:
            setup_toolkit_logging()
            mock_sdk.assert_called_once()


class TestCliLoggingSetup:
    """Test CLI logging setup functionality."""

    def setup_method(self):
        _clear_handlers()

    def teardown_method(self):
        _clear_handlers()

    @patch("rich.logging.RichHandler")
    @patch("popo.cli.common.console")
    def test_cli_logging_setup_with_rich(self, mock_console, mock_rich_handler):
        mock_handler = Mock()
        mock_handler.level = logging.NOTSET
        mock_rich_handler.return_value = mock_handler

        _setup_cli_logging()

        mock_rich_handler.assert_called_once_with(
            show_time=False, show_path=False, show_level=False, console=mock_console
        )
        assert mock_handler in logging.getLogger().handlers


class TestSdkLoggingSetup:
    """Test SDK logging setup functionality."""

    def setup_method(self):
        _clear_handlers("popo")

    def teardown_method(self):
        _clear_handlers("popo")

    def test_sdk_logging_setup(self):
        _setup_sdk_logging()

        toolkit_logger = logging.getLogger("popo")
        assert len(toolkit_logger.handlers) == 1
        assert isinstance(toolkit_logger.handlers[0], logging.StreamHandler)
        assert toolkit_logger.level == logging.INFO

    def test_sdk_logging_no_duplicate_handlers(self):
        _setup_sdk_logging()
        _setup_sdk_logging()

        assert len(logging.getLogger("popo").handlers) == 1


class TestLoggingStateManagement:
    """Test logging state management functions."""

    def setup_method(self):
        reset_logging_config()
        _clear_handlers("popo")

    def teardown_method(self):
        _clear_handlers("popo")
        logging.getLogger("popo").setLevel(logging.NOTSET)

    def test_is_logging_configured_initial_state(self):
        assert is_logging_configured() is False

    def test_reset_logging_config(self):
        setup_toolkit_logging(mode="sdk")
        assert is_logging_configured() is True

        reset_logging_config()
        assert is_logging_configured() is False

    def test_actual_logging_output_sdk(self, caplog):
        setup_toolkit_logging(mode="sdk")
        logger = logging.getLogger("popo.test")

        with caplog.at_level(logging.INFO, logger="popo"):
            logger.info("Test message")

        assert "Test message" in caplog.text

    def test_logger_hierarchy(self):
        setup_toolkit_logging(mode="sdk")

        child_logger = logging.getLogger("popo.naming")
        parent_logger = logging.getLogger("popo")

        assert child_logger.parent == parent_logger
        assert len(parent_logger.handlers) == 1
