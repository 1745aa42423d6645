"""
Update contract shared by every indicator.

An indicator is a private state machine advanced only by next(). Each call
consumes one observation and returns the value after incorporating it.
reset() restores the state the instance had right after construction.
Instances are not thread-safe; each one belongs to a single stream consumer.
"""

import math
from abc import ABC, abstractmethod
from numbers import Real
from typing import Any

from ta_stream.data.models import Observation
from ta_stream.errors import InvalidParameterError, InvalidPeriodError
from ta_stream.logging.config import get_logger, log_configuration_rejected

logger = get_logger(__name__)


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Divide with IEEE-754 results for a zero denominator.

    x / 0 gives a signed infinity and 0 / 0 (or nan / 0) gives nan, so a
    degenerate input propagates through the output instead of raising.
    """
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def validate_period(period: Any, indicator: str, minimum: int = 1) -> int:
    """
    Check a window length or smoothing horizon.

    Raises:
        InvalidPeriodError: If period is not an integer or is below minimum
    """
    if isinstance(period, bool) or not isinstance(period, int):
        log_configuration_rejected(logger, indicator, "period is not an integer", {"period": period})
        raise InvalidPeriodError(
            f"{indicator}: period must be an integer, got {period!r}",
            period=period,
            indicator=indicator,
        )

    if period < minimum:
        log_configuration_rejected(logger, indicator, "period below minimum",
                                   {"period": period, "minimum": minimum})
        raise InvalidPeriodError(
            f"{indicator}: period must be at least {minimum}, got {period}",
            period=period,
            indicator=indicator,
        )

    return period


def validate_positive(parameter: str, value: Any, indicator: str) -> float:
    """
    Check a multiplier or smoothing parameter.

    Raises:
        InvalidParameterError: If value is not a finite number greater than zero
    """
    if isinstance(value, bool) or not isinstance(value, Real) or not (value > 0 and math.isfinite(value)):
        log_configuration_rejected(logger, indicator, f"{parameter} must be positive", {parameter: value})
        raise InvalidParameterError(
            f"{indicator}: {parameter} must be a positive number, got {value!r}",
            parameter=parameter,
            value=value,
            indicator=indicator,
        )

    return float(value)


class Indicator(ABC):
    """Base class for streaming indicators."""

    name = "Indicator"

    def __init__(self, period: int, minimum_period: int = 1):
        self._period = validate_period(period, self.name, minimum_period)

    @property
    def period(self) -> int:
        """Configured window length or smoothing horizon."""
        return self._period

    @abstractmethod
    def next(self, observation: Observation) -> Any:
        """Feed one observation and return the updated value."""

    @abstractmethod
    def reset(self) -> None:
        """Discard all history, keeping the configuration."""

    def _params(self) -> tuple:
        return (self._period,)

    def __repr__(self) -> str:
        params = ", ".join(f"{p:g}" if isinstance(p, float) else str(p) for p in self._params())
        return f"{self.name}({params})"

    __str__ = __repr__
