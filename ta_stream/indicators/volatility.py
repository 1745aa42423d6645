"""True range, ATR and band/channel indicators"""

from dataclasses import dataclass
from typing import Optional

from ta_stream.data.models import Observation, Quote, close_of, high_of, low_of

from .base import Indicator, validate_positive
from .dispersion import StandardDeviation
from .extremum import Maximum, Minimum
from .moving_average import ExponentialMovingAverage, SimpleMovingAverage


@dataclass(frozen=True)
class BollingerBandsOutput:
    """Bollinger band values for one update."""
    lower: float
    average: float
    upper: float


@dataclass(frozen=True)
class KeltnerChannelOutput:
    """Keltner channel values for one update."""
    lower: float
    average: float
    upper: float


@dataclass(frozen=True)
class ChandelierExitOutput:
    """Trailing stop levels for long and short positions."""
    long: float
    short: float


def _typical_price(observation: Observation) -> float:
    if isinstance(observation, Quote):
        return observation.typical_price
    return close_of(observation)


class TrueRange(Indicator):
    """
    Greatest of the bar range and the gaps to the previous close.

    TR = max(high - low, abs(high - prev_close), abs(low - prev_close))

    The first quote has no previous close and yields high - low. For bare
    numbers TR is the absolute change from the previous number, 0 at first.
    """

    name = "TR"

    def __init__(self):
        super().__init__(1)
        self._prev_close: Optional[float] = None

    def next(self, observation: Observation) -> float:
        if isinstance(observation, Quote):
            if self._prev_close is None:
                distance = observation.high - observation.low
            else:
                distance = max(
                    observation.high - observation.low,
                    abs(observation.high - self._prev_close),
                    abs(observation.low - self._prev_close),
                )
            self._prev_close = observation.close
            return distance

        value = close_of(observation)
        distance = 0.0 if self._prev_close is None else abs(value - self._prev_close)
        self._prev_close = value
        return distance

    def reset(self) -> None:
        self._prev_close = None

    def _params(self) -> tuple:
        return ()


class AverageTrueRange(Indicator):
    """EMA of true range. Updates the true range first, then its average."""

    name = "ATR"

    def __init__(self, period: int = 14):
        super().__init__(period)
        self._true_range = TrueRange()
        self._ema = ExponentialMovingAverage(self._period)

    def next(self, observation: Observation) -> float:
        return self._ema.next(self._true_range.next(observation))

    def reset(self) -> None:
        self._true_range.reset()
        self._ema.reset()


class BollingerBands(Indicator):
    """
    SMA of closes with bands at +/- multiplier standard deviations.

    Order per update: average, then deviation.
    """

    name = "BB"

    def __init__(self, period: int = 9, multiplier: float = 2.0):
        super().__init__(period)
        self._multiplier = validate_positive("multiplier", multiplier, self.name)
        self._sma = SimpleMovingAverage(self._period)
        self._sd = StandardDeviation(self._period)

    @property
    def multiplier(self) -> float:
        return self._multiplier

    def next(self, observation: Observation) -> BollingerBandsOutput:
        value = close_of(observation)
        average = self._sma.next(value)
        width = self._sd.next(value) * self._multiplier
        return BollingerBandsOutput(
            lower=average - width,
            average=average,
            upper=average + width,
        )

    def reset(self) -> None:
        self._sma.reset()
        self._sd.reset()

    def _params(self) -> tuple:
        return (self._period, self._multiplier)


class KeltnerChannel(Indicator):
    """
    EMA of typical price with bands at +/- multiplier ATRs.

    Order per update: average, then ATR.
    """

    name = "KC"

    def __init__(self, period: int = 10, multiplier: float = 2.0):
        super().__init__(period)
        self._multiplier = validate_positive("multiplier", multiplier, self.name)
        self._ema = ExponentialMovingAverage(self._period)
        self._atr = AverageTrueRange(self._period)

    @property
    def multiplier(self) -> float:
        return self._multiplier

    def next(self, observation: Observation) -> KeltnerChannelOutput:
        average = self._ema.next(_typical_price(observation))
        width = self._atr.next(observation) * self._multiplier
        return KeltnerChannelOutput(
            lower=average - width,
            average=average,
            upper=average + width,
        )

    def reset(self) -> None:
        self._ema.reset()
        self._atr.reset()

    def _params(self) -> tuple:
        return (self._period, self._multiplier)


class ChandelierExit(Indicator):
    """
    ATR-based trailing stops hung from the period's extremes.

    long = highest high - multiplier * ATR
    short = lowest low + multiplier * ATR

    Order per update: ATR, highest high, lowest low.
    """

    name = "CE"

    def __init__(self, period: int = 22, multiplier: float = 3.0):
        super().__init__(period)
        self._multiplier = validate_positive("multiplier", multiplier, self.name)
        self._atr = AverageTrueRange(self._period)
        self._max = Maximum(self._period)
        self._min = Minimum(self._period)

    @property
    def multiplier(self) -> float:
        return self._multiplier

    def next(self, observation: Observation) -> ChandelierExitOutput:
        offset = self._atr.next(observation) * self._multiplier
        highest = self._max.next(high_of(observation))
        lowest = self._min.next(low_of(observation))
        return ChandelierExitOutput(
            long=highest - offset,
            short=lowest + offset,
        )

    def reset(self) -> None:
        self._atr.reset()
        self._max.reset()
        self._min.reset()

    def _params(self) -> tuple:
        return (self._period, self._multiplier)
