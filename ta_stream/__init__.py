"""
TA Stream - Incremental Technical Analysis Indicators

Streaming indicator engine for OHLCV market data. Every indicator consumes
one observation at a time and reports its updated value without rescanning
history, using bounded memory per instance.
"""

from .data.models import Quote, QuoteBuilder
from .indicators.base import Indicator
from .indicators.registry import create_indicator

__version__ = "0.1.0"
__author__ = "TA Stream Team"

__all__ = ["Quote", "QuoteBuilder", "Indicator", "create_indicator"]
