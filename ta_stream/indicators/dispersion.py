"""Rolling standard deviation and mean absolute deviation"""

import math
from abc import abstractmethod

from ta_stream.data.models import Observation, close_of

from .base import Indicator
from .moving_average import SimpleMovingAverage
from .window import RingBuffer


class _WindowDispersion(Indicator):
    """Shared window handling: each update refreshes the buffer, then the owned mean."""

    def __init__(self, period: int = 9):
        super().__init__(period)
        self._window = RingBuffer(self._period)
        self._mean = SimpleMovingAverage(self._period)

    def next(self, observation: Observation) -> float:
        value = close_of(observation)
        self._window.push(value)
        mean = self._mean.next(value)

        # a flat window has exactly zero spread
        first = self._window.oldest()
        if all(x == first for x in self._window):
            return 0.0

        return self._dispersion(mean)

    @abstractmethod
    def _dispersion(self, mean: float) -> float:
        """Spread of the held window around its mean."""

    def reset(self) -> None:
        self._window.clear()
        self._mean.reset()


class StandardDeviation(_WindowDispersion):
    """Population standard deviation (divides by the window size, not size - 1)."""

    name = "SD"

    def _dispersion(self, mean: float) -> float:
        squares = sum((x - mean) ** 2 for x in self._window)
        return math.sqrt(squares / len(self._window))


class MeanAbsoluteDeviation(_WindowDispersion):
    """Mean of absolute deviations from the window mean."""

    name = "MAD"

    def _dispersion(self, mean: float) -> float:
        return sum(abs(x - mean) for x in self._window) / len(self._window)
