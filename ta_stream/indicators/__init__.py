"""Streaming indicator implementations"""

from .base import Indicator
from .dispersion import MeanAbsoluteDeviation, StandardDeviation
from .extremum import Maximum, Minimum
from .moving_average import (
    ExponentialMovingAverage,
    HullMovingAverage,
    SimpleMovingAverage,
    WeightedMovingAverage,
)
from .oscillators import (
    CommodityChannelIndex,
    EfficiencyRatio,
    FastStochastic,
    MACDOutput,
    MovingAverageConvergenceDivergence,
    PercentagePriceOscillator,
    PPOOutput,
    RateOfChange,
    RelativeStrengthIndex,
    SlowStochastic,
)
from .registry import available_indicators, create_indicator
from .volatility import (
    AverageTrueRange,
    BollingerBands,
    BollingerBandsOutput,
    ChandelierExit,
    ChandelierExitOutput,
    KeltnerChannel,
    KeltnerChannelOutput,
    TrueRange,
)
from .volume import MoneyFlowIndex

__all__ = [
    "Indicator",
    "create_indicator",
    "available_indicators",
    # Moving averages
    "SimpleMovingAverage",
    "ExponentialMovingAverage",
    "WeightedMovingAverage",
    "HullMovingAverage",
    # Window primitives
    "Maximum",
    "Minimum",
    "StandardDeviation",
    "MeanAbsoluteDeviation",
    # Volatility
    "TrueRange",
    "AverageTrueRange",
    "BollingerBands",
    "BollingerBandsOutput",
    "KeltnerChannel",
    "KeltnerChannelOutput",
    "ChandelierExit",
    "ChandelierExitOutput",
    # Oscillators
    "MovingAverageConvergenceDivergence",
    "MACDOutput",
    "PercentagePriceOscillator",
    "PPOOutput",
    "RelativeStrengthIndex",
    "RateOfChange",
    "EfficiencyRatio",
    "FastStochastic",
    "SlowStochastic",
    "CommodityChannelIndex",
    "MoneyFlowIndex",
]
