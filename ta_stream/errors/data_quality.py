"""
Input error classifications for quote record construction.

These exceptions report why a quote builder could not produce a record.
Neither is retried automatically; the caller supplies corrected values.
"""

from typing import Any, Optional


class DataQualityError(Exception):
    """Base class for rejected market data input."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class QuoteIncompleteError(DataQualityError):
    """One or more of the five OHLCV fields was never supplied."""

    def __init__(self, message: str, missing_fields: Optional[list[str]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.missing_fields = missing_fields or []


class QuoteInvalidError(DataQualityError):
    """All fields supplied but the OHLC/volume relationships do not hold."""

    def __init__(self, message: str, quote_values: Optional[dict[str, float]] = None,
                 violations: Optional[list[str]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.quote_values = quote_values or {}
        self.violations = violations or []
