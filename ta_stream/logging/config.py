"""
Logging configuration for the TA Stream indicator library.

All modules obtain their logger through get_logger so that structlog
formatting stays consistent. Indicator update paths never log; only
construction, configuration and registry activity is recorded.
"""
import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger

LIBRARY_LOGGER = "ta_stream"


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None,
    attach_handler: bool = True,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure structlog for the library and its host application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
        attach_handler: Give the ta_stream logger its own stream handler. Pass
            False when the host application already routes stdlib logging.
        stream: Stream for that handler (defaults to stderr)

    Only the ta_stream logger hierarchy is touched; the root logger and
    handlers installed by the host application are left alone.
    """
    log_level = getattr(logging, level.upper())

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    library_logger.setLevel(log_level)

    if attach_handler and not library_logger.handlers:
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        library_logger.addHandler(handler)
        library_logger.propagate = False

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def log_configuration_rejected(
    logger: FilteringBoundLogger,
    indicator: str,
    reason: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a rejected indicator configuration with standardized fields.

    Args:
        logger: Structlog logger instance
        indicator: Short name of the indicator being constructed
        reason: Why the configuration was rejected
        context: Offending parameter values
    """
    bound_logger = logger.bind(
        indicator=indicator,
        reason=reason,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Indicator configuration rejected")
