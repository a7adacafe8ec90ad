"""Unit tests for logging module."""

import logging
from unittest.mock import patch

import structlog

from maven_modules.utils.logging import (
    LogContext,
    bind_context,
    clear_context,
    get_logger,
    setup_logging,
    unbind_context,
)


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_development_mode(self) -> None:
        """Test logging configuration in development mode."""
        with patch("maven_modules.utils.logging.get_settings") as mock_settings:
            mock_settings.return_value.app.env = "development"
            mock_settings.return_value.app.log_level = "WARNING"

            setup_logging()

            assert logging.getLogger().level == logging.WARNING
            processors = structlog.get_config()["processors"]
            assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_production_mode(self) -> None:
        """Test logging configuration in production mode."""
        with patch("maven_modules.utils.logging.get_settings") as mock_settings:
            mock_settings.return_value.app.env = "production"
            mock_settings.return_value.app.log_level = "INFO"

            setup_logging()

            assert logging.getLogger().level == logging.INFO
            processors = structlog.get_config()["processors"]
            assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_level_override(self) -> None:
        """Test an explicit level wins over settings."""
        with patch("maven_modules.utils.logging.get_settings") as mock_settings:
            mock_settings.return_value.app.env = "development"
            mock_settings.return_value.app.log_level = "WARNING"

            setup_logging("DEBUG")

            assert logging.getLogger().level == logging.DEBUG


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger_returns_logger(self) -> None:
        """Test that get_logger returns a logger."""
        logger = get_logger("test")
        assert logger is not None
        assert hasattr(logger, "info")
        assert hasattr(logger, "debug")


class TestContext:
    """Tests for logging context helpers."""

    def teardown_method(self) -> None:
        clear_context()

    def test_log_context_binds_and_unbinds(self) -> None:
        """Test LogContext scoping."""
        with LogContext(command="delete-modules"):
            assert structlog.contextvars.get_contextvars() == {"command": "delete-modules"}
        assert structlog.contextvars.get_contextvars() == {}

    def test_bind_and_unbind(self) -> None:
        """Test explicit binding."""
        bind_context(directory="/tmp/project", verbose=True)
        unbind_context("verbose")
        assert structlog.contextvars.get_contextvars() == {"directory": "/tmp/project"}

    def test_clear(self) -> None:
        """Test clearing all context."""
        bind_context(a=1)
        clear_context()
        assert structlog.contextvars.get_contextvars() == {}
