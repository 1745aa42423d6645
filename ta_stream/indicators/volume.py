"""MFI (Money Flow Index) calculations"""

from typing import Optional

from ta_stream.data.models import Observation, Quote, close_of, volume_of

from .base import Indicator
from .window import RingBuffer


class MoneyFlowIndex(Indicator):
    """
    Volume-weighted RSI over typical price.

    MFI = 100 * positive_flow / (positive_flow + negative_flow)

    Raw money flow is typical price * volume, signed by whether typical price
    rose or fell since the previous quote. An unchanged typical price (and the
    very first quote) contributes no flow. Reads 50 when both sums are zero.
    """

    name = "MFI"

    def __init__(self, period: int = 14):
        super().__init__(period)
        self._flows = RingBuffer(self._period)
        self._prev_tp: Optional[float] = None

    def next(self, observation: Observation) -> float:
        if isinstance(observation, Quote):
            tp = observation.typical_price
        else:
            tp = close_of(observation)

        flow = tp * volume_of(observation)
        if self._prev_tp is None or tp == self._prev_tp:
            flow = 0.0
        elif tp < self._prev_tp:
            flow = -flow
        self._prev_tp = tp
        self._flows.push(flow)

        positive = sum(f for f in self._flows if f > 0.0)
        negative = -sum(f for f in self._flows if f < 0.0)
        total = positive + negative
        if total == 0.0:
            return 50.0
        return 100.0 * positive / total

    def reset(self) -> None:
        self._flows.clear()
        self._prev_tp = None
