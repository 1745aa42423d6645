"""Tests for logging configuration and construction logging."""

import io
import logging
from unittest.mock import Mock, patch

import pytest

from ta_stream.errors import InvalidPeriodError
from ta_stream.indicators.moving_average import SimpleMovingAverage
from ta_stream.logging.config import LIBRARY_LOGGER, configure_logging, get_logger, log_configuration_rejected


@pytest.fixture(autouse=True)
def library_logger():
    """Leave the ta_stream logger as each test found it"""
    logger = logging.getLogger(LIBRARY_LOGGER)
    saved = (list(logger.handlers), logger.level, logger.propagate)
    logger.handlers.clear()
    logger.propagate = True
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


class TestLoggingConfig:
    """Test structlog configuration"""

    def test_configure_and_get_logger(self):
        configure_logging(level="DEBUG", format_json=True)
        logger = get_logger("ta_stream.test")
        assert logger is not None
        logger.info("Logger configured", component="test")

    def test_console_renderer(self):
        configure_logging(level="WARNING", format_json=False, include_caller=True)
        get_logger("ta_stream.test").warning("Console output")

    def test_invalid_level(self):
        with pytest.raises(AttributeError):
            configure_logging(level="LOUD")

    def test_root_logger_untouched(self, library_logger):
        root = logging.getLogger()
        root_handlers = list(root.handlers)
        root_level = root.level

        configure_logging(level="DEBUG")

        assert root.handlers == root_handlers
        assert root.level == root_level
        assert library_logger.level == logging.DEBUG

    def test_handler_attached_once(self, library_logger):
        configure_logging(level="INFO")
        configure_logging(level="INFO")
        assert len(library_logger.handlers) == 1
        assert library_logger.propagate is False

    def test_host_routes_logging(self, library_logger):
        """With attach_handler=False records propagate to the host's handlers"""
        configure_logging(level="INFO", attach_handler=False)
        assert library_logger.handlers == []
        assert library_logger.propagate is True

    def test_output_goes_to_stream(self):
        stream = io.StringIO()
        configure_logging(level="INFO", format_json=True, stream=stream)
        get_logger("ta_stream.test.output").info("Indicator created", indicator="SMA")

        output = stream.getvalue()
        assert '"event": "Indicator created"' in output
        assert '"indicator": "SMA"' in output


class TestConfigurationRejectedLogging:
    """Rejected configuration is recorded with structured fields"""

    def test_log_configuration_rejected(self):
        logger = Mock()
        bound = logger.bind.return_value
        bound.bind.return_value = bound

        log_configuration_rejected(logger, "SMA", "period below minimum", {"period": 0})

        logger.bind.assert_called_once_with(indicator="SMA", reason="period below minimum")
        bound.bind.assert_called_once_with(context={"period": 0})
        bound.debug.assert_called_once_with("Indicator configuration rejected")

    def test_construction_failure_is_logged(self):
        with patch("ta_stream.indicators.base.log_configuration_rejected") as rejected:
            with pytest.raises(InvalidPeriodError):
                SimpleMovingAverage(0)

        rejected.assert_called_once()
        assert rejected.call_args.args[1] == "SMA"
