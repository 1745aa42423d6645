"""Simple, exponential, weighted and Hull moving averages"""

import math

from ta_stream.data.models import Observation, close_of

from .base import Indicator
from .window import RingBuffer


class SimpleMovingAverage(Indicator):
    """
    Arithmetic mean of the last ``period`` observations.

    The running sum is adjusted by the evicted and incoming values so each
    update is O(1). During warm-up the mean covers whatever has been seen.

    Example:
        >>> sma = SimpleMovingAverage(3)
        >>> [sma.next(x) for x in (10.0, 11.0, 12.0, 13.0)]
        [10.0, 10.5, 11.0, 12.0]
    """

    name = "SMA"

    def __init__(self, period: int = 9):
        super().__init__(period)
        self._window = RingBuffer(self._period)
        self._sum = 0.0

    def next(self, observation: Observation) -> float:
        value = close_of(observation)
        evicted = self._window.push(value)
        self._sum = self._sum - evicted + value
        return self._sum / len(self._window)

    def reset(self) -> None:
        self._window.clear()
        self._sum = 0.0


class ExponentialMovingAverage(Indicator):
    """
    EMA with smoothing factor k = 2 / (period + 1).

    The first observation seeds the recursion unchanged; afterwards
    EMA = k * x + (1 - k) * EMA_prev.
    """

    name = "EMA"

    def __init__(self, period: int = 9):
        super().__init__(period)
        self._k = 2.0 / (self._period + 1)
        self._current = 0.0
        self._is_new = True

    @property
    def k(self) -> float:
        """Smoothing factor."""
        return self._k

    def next(self, observation: Observation) -> float:
        value = close_of(observation)
        if self._is_new:
            self._is_new = False
            self._current = value
        else:
            self._current = (self._k * value) + ((1.0 - self._k) * self._current)
        return self._current

    def reset(self) -> None:
        self._current = 0.0
        self._is_new = True


class WeightedMovingAverage(Indicator):
    """
    Linearly weighted mean, newest observation weighted heaviest.

    With c observations held, weights run 1..c and the divisor is c(c+1)/2.
    """

    name = "WMA"

    def __init__(self, period: int = 9):
        super().__init__(period)
        self._window = RingBuffer(self._period)
        self._sum = 0.0
        self._numerator = 0.0

    def next(self, observation: Observation) -> float:
        value = close_of(observation)
        if self._window.is_full():
            # every held weight drops by one, the evicted value falls out
            self._numerator = self._numerator + self._period * value - self._sum
            self._sum = self._sum - self._window.push(value) + value
        else:
            self._window.push(value)
            self._numerator += len(self._window) * value
            self._sum += value

        count = len(self._window)
        return self._numerator / (count * (count + 1) / 2.0)

    def reset(self) -> None:
        self._window.clear()
        self._sum = 0.0
        self._numerator = 0.0


class HullMovingAverage(Indicator):
    """
    HMA = WMA(floor(sqrt(n))) of (2 * WMA(n // 2) - WMA(n)).

    Children are updated half, full, then smoothing on every call.
    """

    name = "HMA"

    def __init__(self, period: int = 9):
        super().__init__(period, minimum_period=2)
        self._half = WeightedMovingAverage(self._period // 2)
        self._full = WeightedMovingAverage(self._period)
        self._smooth = WeightedMovingAverage(int(math.sqrt(self._period)))

    def next(self, observation: Observation) -> float:
        value = close_of(observation)
        half = self._half.next(value)
        full = self._full.next(value)
        return self._smooth.next(2.0 * half - full)

    def reset(self) -> None:
        self._half.reset()
        self._full.reset()
        self._smooth.reset()
