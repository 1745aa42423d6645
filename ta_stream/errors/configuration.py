"""
Configuration error classifications for indicator construction.

Raised before an indicator instance exists. These are not recoverable by
retrying; the configuration itself has to change.
"""

from typing import Any, Optional


class ConfigurationError(Exception):
    """Base class for rejected indicator configuration."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class InvalidPeriodError(ConfigurationError):
    """Period is not an integer or lies below the indicator's minimum."""

    def __init__(self, message: str, period: Any = None,
                 indicator: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.period = period
        self.indicator = indicator


class InvalidParameterError(ConfigurationError):
    """A multiplier or smoothing parameter is outside its domain."""

    def __init__(self, message: str, parameter: Optional[str] = None,
                 value: Any = None, indicator: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.parameter = parameter
        self.value = value
        self.indicator = indicator


class InconsistentPeriodsError(ConfigurationError):
    """Constituent periods violate the ordering the indicator requires."""

    def __init__(self, message: str, periods: Optional[dict[str, int]] = None,
                 indicator: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.periods = periods or {}
        self.indicator = indicator


class UnknownIndicatorError(ConfigurationError):
    """No indicator is registered under the requested name."""

    def __init__(self, message: str, name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.name = name
