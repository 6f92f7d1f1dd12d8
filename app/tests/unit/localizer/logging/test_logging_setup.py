"""Unit tests for localizer.logging.setup module.

Tests cover:
- configure_logging function
- get_module_logger function
- Test logging suppression in test environment
"""

import logging

import pytest
import structlog

from localizer.logging.setup import (
    configure_logging,
    get_module_logger,
    _is_test_environment,
    _processors,
)


@pytest.mark.unit
class TestIsTestEnvironment:
    """Test suite for _is_test_environment helper."""

    def test_detects_pytest_in_sys_modules(self):
        """Returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True


@pytest.mark.unit
class TestProcessors:
    """Test suite for the processor chain helper."""

    def test_json_renderer_in_production(self):
        """Production output ends with the JSON renderer."""
        processors = _processors(json_output=True)
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer_in_development(self):
        """Development output ends with the console renderer."""
        processors = _processors(json_output=False)
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_context_vars_merged_first(self):
        """Bound context variables are merged before anything else."""
        processors = _processors(json_output=True)
        assert processors[0] is structlog.contextvars.merge_contextvars


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_logging_returns_bound_logger(self, mock_settings):
        """configure_logging returns a logger instance."""
        result = configure_logging(settings=mock_settings)

        assert result is not None
        assert hasattr(result, "info")
        assert hasattr(result, "error")

    def test_configure_logging_overrides(self, mock_settings):
        """configure_logging accepts level and production overrides."""
        assert configure_logging(settings=mock_settings, log_level="DEBUG")
        assert configure_logging(settings=mock_settings, is_production=True)

    def test_configure_logging_suppresses_output_in_tests(self, mock_settings):
        """Root logger is silenced under pytest."""
        configure_logging(settings=mock_settings)
        assert logging.root.level > logging.CRITICAL


@pytest.mark.unit
class TestGetModuleLogger:
    """Test suite for get_module_logger function."""

    def test_returns_logger(self):
        """get_module_logger returns a usable logger."""
        logger = get_module_logger()
        assert hasattr(logger, "info")
        logger.info("test_event", key="value")

    def test_binds_module_context(self):
        """Logger is bound with the calling module's name."""
        logger = get_module_logger()
        context = logger._context  # pylint: disable=protected-access
        assert context["module_path"] == __name__
        assert context["component"] == __name__.split(".")[-1]
