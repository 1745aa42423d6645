"""
Indicator construction by name.

The table below is the complete set of constructible indicators; there is no
discovery mechanism. Names are matched case-insensitively against the short
key (``"sma"``) or the long alias (``"simple_moving_average"``).
"""

import inspect
from typing import Any, Optional

from ta_stream.config.loader import ConfigLoader
from ta_stream.config.validation import ConfigValidator
from ta_stream.errors import ConfigurationError, UnknownIndicatorError
from ta_stream.logging.config import get_logger

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
    MovingAverageConvergenceDivergence,
    PercentagePriceOscillator,
    RateOfChange,
    RelativeStrengthIndex,
    SlowStochastic,
)
from .volatility import (
    AverageTrueRange,
    BollingerBands,
    ChandelierExit,
    KeltnerChannel,
    TrueRange,
)
from .volume import MoneyFlowIndex

logger = get_logger(__name__)

INDICATORS: dict[str, type[Indicator]] = {
    "sma": SimpleMovingAverage,
    "ema": ExponentialMovingAverage,
    "wma": WeightedMovingAverage,
    "hma": HullMovingAverage,
    "max": Maximum,
    "min": Minimum,
    "sd": StandardDeviation,
    "mad": MeanAbsoluteDeviation,
    "tr": TrueRange,
    "atr": AverageTrueRange,
    "bb": BollingerBands,
    "kc": KeltnerChannel,
    "ce": ChandelierExit,
    "macd": MovingAverageConvergenceDivergence,
    "ppo": PercentagePriceOscillator,
    "rsi": RelativeStrengthIndex,
    "roc": RateOfChange,
    "fast_stoch": FastStochastic,
    "slow_stoch": SlowStochastic,
    "cci": CommodityChannelIndex,
    "er": EfficiencyRatio,
    "mfi": MoneyFlowIndex,
}

ALIASES: dict[str, str] = {
    "simple_moving_average": "sma",
    "exponential_moving_average": "ema",
    "weighted_moving_average": "wma",
    "hull_moving_average": "hma",
    "maximum": "max",
    "minimum": "min",
    "standard_deviation": "sd",
    "mean_absolute_deviation": "mad",
    "true_range": "tr",
    "average_true_range": "atr",
    "bollinger_bands": "bb",
    "keltner_channel": "kc",
    "chandelier_exit": "ce",
    "moving_average_convergence_divergence": "macd",
    "percentage_price_oscillator": "ppo",
    "relative_strength_index": "rsi",
    "rate_of_change": "roc",
    "fast_stochastic": "fast_stoch",
    "slow_stochastic": "slow_stoch",
    "commodity_channel_index": "cci",
    "efficiency_ratio": "er",
    "money_flow_index": "mfi",
}


def resolve_indicator(name: str) -> tuple[str, type[Indicator]]:
    """
    Map a short or long indicator name to its key and class.

    Raises:
        UnknownIndicatorError: If the name is not registered
    """
    key = name.strip().lower().replace("-", "_").replace(" ", "_")
    key = ALIASES.get(key, key)

    if key not in INDICATORS:
        raise UnknownIndicatorError(f"Unknown indicator: {name!r}", name=name)

    return key, INDICATORS[key]


def constructor_fields(indicator_cls: type[Indicator]) -> set[str]:
    """Keyword parameters accepted by an indicator's constructor."""
    signature = inspect.signature(indicator_cls.__init__)
    return {param for param in signature.parameters if param != "self"}


def create_indicator(name: str, loader: Optional[ConfigLoader] = None, **params: Any) -> Indicator:
    """
    Construct a ready indicator by name.

    Parameters come from the built-in defaults, then indicators.yaml, then
    ``params``. The merged set is validated as a whole before construction so
    every offending field is reported at once.

    Raises:
        UnknownIndicatorError: If the name is not registered
        ConfigurationError: If the merged parameters are invalid
    """
    key, indicator_cls = resolve_indicator(name)
    loader = loader or ConfigLoader.create()
    merged = loader.indicator_params(key, params)

    errors = ConfigValidator.validate_indicator_params(key, merged, constructor_fields(indicator_cls))
    if errors:
        logger.warning(
            "Indicator configuration invalid",
            indicator=key,
            errors=[f"{error.field}: {error.message}" for error in errors],
        )
        raise ConfigurationError(
            f"Invalid configuration for {key}: "
            + "; ".join(f"{error.field} {error.message.lower()} (got {error.value!r})" for error in errors),
            context={"indicator": key, "errors": errors},
        )

    indicator = indicator_cls(**merged)
    logger.debug("Indicator created", indicator=repr(indicator))
    return indicator


def available_indicators() -> list[str]:
    """Registered short keys, sorted."""
    return sorted(INDICATORS)
