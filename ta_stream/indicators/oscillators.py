"""Momentum and convergence/divergence oscillators"""

from abc import abstractmethod
from dataclasses import dataclass

from ta_stream.data.models import Observation, Quote, close_of, high_of, low_of
from ta_stream.errors import InconsistentPeriodsError
from ta_stream.logging.config import get_logger, log_configuration_rejected

from .base import Indicator, ieee_divide, validate_period
from .dispersion import MeanAbsoluteDeviation
from .extremum import Maximum, Minimum
from .moving_average import ExponentialMovingAverage, SimpleMovingAverage
from .window import RingBuffer

logger = get_logger(__name__)

# Lambert's constant, scales CCI so most readings fall within +/-100
CCI_SCALE = 0.015


@dataclass(frozen=True)
class MACDOutput:
    """MACD line, its signal line and their difference."""
    macd: float
    signal: float
    histogram: float


@dataclass(frozen=True)
class PPOOutput:
    """Percentage price oscillator, its signal line and their difference."""
    ppo: float
    signal: float
    histogram: float


def _check_fast_slow(indicator: str, fast_period: int, slow_period: int) -> None:
    if fast_period >= slow_period:
        periods = {"fast_period": fast_period, "slow_period": slow_period}
        log_configuration_rejected(logger, indicator, "fast period not shorter than slow", periods)
        raise InconsistentPeriodsError(
            f"{indicator}: fast period ({fast_period}) must be shorter than slow period ({slow_period})",
            periods=periods,
            indicator=indicator,
        )


class _EMAConvergence(Indicator):
    """
    Two EMAs of different horizon over one input, plus a signal EMA of their spread.

    Order per update: fast EMA, slow EMA, signal EMA.
    """

    def __init__(self, fast_period: int = 12, slow_period: int = 26, signal_period: int = 9):
        fast_period = validate_period(fast_period, self.name)
        super().__init__(slow_period)
        signal_period = validate_period(signal_period, self.name)
        _check_fast_slow(self.name, fast_period, self._period)

        self._fast_ema = ExponentialMovingAverage(fast_period)
        self._slow_ema = ExponentialMovingAverage(self._period)
        self._signal_ema = ExponentialMovingAverage(signal_period)

    @property
    def fast_period(self) -> int:
        return self._fast_ema.period

    @property
    def slow_period(self) -> int:
        """Also reported as period."""
        return self._slow_ema.period

    @property
    def signal_period(self) -> int:
        return self._signal_ema.period

    @abstractmethod
    def _spread(self, fast: float, slow: float) -> float:
        """Combine the fast and slow averages into the line value."""

    def _update(self, observation: Observation) -> tuple[float, float]:
        value = close_of(observation)
        fast = self._fast_ema.next(value)
        slow = self._slow_ema.next(value)
        spread = self._spread(fast, slow)
        return spread, self._signal_ema.next(spread)

    def reset(self) -> None:
        self._fast_ema.reset()
        self._slow_ema.reset()
        self._signal_ema.reset()

    def _params(self) -> tuple:
        return (self.fast_period, self.slow_period, self.signal_period)


class MovingAverageConvergenceDivergence(_EMAConvergence):
    """MACD = EMA_fast - EMA_slow; histogram = MACD - signal."""

    name = "MACD"

    def _spread(self, fast: float, slow: float) -> float:
        return fast - slow

    def next(self, observation: Observation) -> MACDOutput:
        macd, signal = self._update(observation)
        return MACDOutput(macd=macd, signal=signal, histogram=macd - signal)


class PercentagePriceOscillator(_EMAConvergence):
    """PPO = 100 * (EMA_fast - EMA_slow) / EMA_slow; histogram = PPO - signal."""

    name = "PPO"

    def _spread(self, fast: float, slow: float) -> float:
        return ieee_divide(fast - slow, slow) * 100.0

    def next(self, observation: Observation) -> PPOOutput:
        ppo, signal = self._update(observation)
        return PPOOutput(ppo=ppo, signal=signal, histogram=ppo - signal)


class RelativeStrengthIndex(Indicator):
    """
    RSI = 100 * EMA(gains) / (EMA(gains) + EMA(losses))

    Both averages are seeded with 0.1 on the first observation so the first
    reading is exactly 50.
    """

    name = "RSI"

    def __init__(self, period: int = 14):
        super().__init__(period)
        self._up_ema = ExponentialMovingAverage(self._period)
        self._down_ema = ExponentialMovingAverage(self._period)
        self._prev_value = 0.0
        self._is_new = True

    def next(self, observation: Observation) -> float:
        value = close_of(observation)
        gain = 0.0
        loss = 0.0

        if self._is_new:
            self._is_new = False
            gain = 0.1
            loss = 0.1
        elif value > self._prev_value:
            gain = value - self._prev_value
        else:
            loss = self._prev_value - value

        self._prev_value = value
        up = self._up_ema.next(gain)
        down = self._down_ema.next(loss)
        return ieee_divide(100.0 * up, up + down)

    def reset(self) -> None:
        self._up_ema.reset()
        self._down_ema.reset()
        self._prev_value = 0.0
        self._is_new = True


class RateOfChange(Indicator):
    """
    ROC = 100 * (x - x[t - period]) / x[t - period]

    Until ``period`` earlier observations exist the oldest one stands in for
    x[t - period]; the first reading is 0.
    """

    name = "ROC"

    def __init__(self, period: int = 9):
        super().__init__(period)
        self._history = RingBuffer(self._period)

    def next(self, observation: Observation) -> float:
        value = close_of(observation)
        previous = self._history.oldest() if len(self._history) else value
        self._history.push(value)
        return ieee_divide(value - previous, previous) * 100.0

    def reset(self) -> None:
        self._history.clear()


class EfficiencyRatio(Indicator):
    """
    Kaufman efficiency ratio: net change over the summed absolute moves.

    Compares x with x[t - period] (the oldest retained value during warm-up)
    and divides by the path length between them. A path with no movement
    reads 1.0.
    """

    name = "ER"

    def __init__(self, period: int = 14):
        super().__init__(period)
        self._history = RingBuffer(self._period)

    def next(self, observation: Observation) -> float:
        value = close_of(observation)
        if not len(self._history):
            self._history.push(value)
            return 1.0

        start = self._history.oldest()
        volatility = 0.0
        previous = start
        for x in self._history:
            volatility += abs(x - previous)
            previous = x
        volatility += abs(value - previous)
        self._history.push(value)

        if volatility == 0.0:
            return 1.0
        return abs(value - start) / volatility

    def reset(self) -> None:
        self._history.clear()


class FastStochastic(Indicator):
    """
    %K = 100 * (close - lowest low) / (highest high - lowest low)

    Reads 50 when the period's range is zero. Order per update: lowest low,
    then highest high.
    """

    name = "FAST_STOCH"

    def __init__(self, period: int = 14):
        super().__init__(period)
        self._min = Minimum(self._period)
        self._max = Maximum(self._period)

    def next(self, observation: Observation) -> float:
        lowest = self._min.next(low_of(observation))
        highest = self._max.next(high_of(observation))
        close = close_of(observation)

        if highest == lowest:
            return 50.0
        return (close - lowest) / (highest - lowest) * 100.0

    def reset(self) -> None:
        self._min.reset()
        self._max.reset()


class SlowStochastic(Indicator):
    """EMA(ema_period) of the fast stochastic. Order: fast, then smoothing."""

    name = "SLOW_STOCH"

    def __init__(self, period: int = 14, ema_period: int = 3):
        super().__init__(period)
        self._fast = FastStochastic(self._period)
        self._ema = ExponentialMovingAverage(validate_period(ema_period, self.name))

    @property
    def ema_period(self) -> int:
        return self._ema.period

    def next(self, observation: Observation) -> float:
        return self._ema.next(self._fast.next(observation))

    def reset(self) -> None:
        self._fast.reset()
        self._ema.reset()

    def _params(self) -> tuple:
        return (self._period, self.ema_period)


class CommodityChannelIndex(Indicator):
    """
    CCI = (tp - SMA(tp)) / (0.015 * MAD(tp)), tp = (high + low + close) / 3

    Bare numbers are used as the typical price. Reads 0 while MAD is 0.
    Order per update: SMA, then MAD.
    """

    name = "CCI"

    def __init__(self, period: int = 20):
        super().__init__(period)
        self._sma = SimpleMovingAverage(self._period)
        self._mad = MeanAbsoluteDeviation(self._period)

    def next(self, observation: Observation) -> float:
        if isinstance(observation, Quote):
            tp = observation.typical_price
        else:
            tp = close_of(observation)

        average = self._sma.next(tp)
        deviation = self._mad.next(tp)
        if deviation == 0.0:
            return 0.0
        return (tp - average) / (CCI_SCALE * deviation)

    def reset(self) -> None:
        self._sma.reset()
        self._mad.reset()
