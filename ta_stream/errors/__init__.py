"""
Error classification for quote construction and indicator configuration.

Input errors are raised while assembling a quote record and can be fixed by
supplying corrected values. Configuration errors are raised while building an
indicator; no instance is produced, so no partially configured indicator can
ever receive an observation.
"""

from .configuration import (
    ConfigurationError,
    InconsistentPeriodsError,
    InvalidParameterError,
    InvalidPeriodError,
    UnknownIndicatorError,
)
from .data_quality import (
    DataQualityError,
    QuoteIncompleteError,
    QuoteInvalidError,
)

__all__ = [
    # Input errors
    "DataQualityError",
    "QuoteIncompleteError",
    "QuoteInvalidError",
    # Configuration errors
    "ConfigurationError",
    "InvalidPeriodError",
    "InvalidParameterError",
    "InconsistentPeriodsError",
    "UnknownIndicatorError",
]
