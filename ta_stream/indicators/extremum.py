"""Rolling maximum and minimum"""

from ta_stream.data.models import Observation, high_of, low_of

from .base import Indicator
from .window import RingBuffer


class Maximum(Indicator):
    """
    Highest value over the last ``period`` observations.

    Quotes contribute their high. The extreme is carried between updates and
    only rescanned when the evicted value was the current extreme. Among equal
    maxima any one is as good as another.
    """

    name = "MAX"

    def __init__(self, period: int = 14):
        super().__init__(period)
        self._window = RingBuffer(self._period)
        self._current = float("-inf")

    def next(self, observation: Observation) -> float:
        value = high_of(observation)
        was_full = self._window.is_full()
        evicted = self._window.push(value)

        if value >= self._current:
            self._current = value
        elif was_full and evicted >= self._current:
            self._current = max(self._window)

        return self._current

    def reset(self) -> None:
        self._window.clear()
        self._current = float("-inf")


class Minimum(Indicator):
    """
    Lowest value over the last ``period`` observations.

    Quotes contribute their low. Mirrors Maximum.
    """

    name = "MIN"

    def __init__(self, period: int = 14):
        super().__init__(period)
        self._window = RingBuffer(self._period)
        self._current = float("inf")

    def next(self, observation: Observation) -> float:
        value = low_of(observation)
        was_full = self._window.is_full()
        evicted = self._window.push(value)

        if value <= self._current:
            self._current = value
        elif was_full and evicted <= self._current:
            self._current = min(self._window)

        return self._current

    def reset(self) -> None:
        self._window.clear()
        self._current = float("inf")
