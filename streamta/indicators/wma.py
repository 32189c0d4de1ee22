"""Weighted and Hull Moving Average indicator implementations."""

import logging
import math
from collections import deque

from streamta.errors import InvalidParameterError
from streamta.marketdata import HasClose
from .base import Indicator, check_period, close_of

log = logging.getLogger(__name__)


class WeightedMovingAverage(Indicator):
    """
    Linearly weighted moving average.

    The newest value has weight n, the oldest weight 1, where n is the
    number of values in the window:

      WMA = sum(i * x_i) / (n * (n + 1) / 2)

    Both the weighted sum and the plain sum are maintained in O(1). Once the
    window is full, shifting every weight down by one subtracts the plain sum
    from the weighted sum.
    """

    def __init__(self, period: int = 9):
        self.period = check_period("period", period)
        self._window: deque[float] = deque(maxlen=period)
        self._weighted_sum: float = 0.0
        self._flat_sum: float = 0.0
        log.debug("Created %r", self)

    def update(self, value: float | HasClose) -> float:
        x = close_of(value)

        if len(self._window) < self.period:
            self._window.append(x)
            self._weighted_sum += x * len(self._window)
            self._flat_sum += x
        else:
            evicted = self._window[0]
            self._window.append(x)
            self._weighted_sum += x * self.period - self._flat_sum
            self._flat_sum += x - evicted

        n = len(self._window)
        return self._weighted_sum / (n * (n + 1) / 2.0)

    def ready(self) -> bool:
        return len(self._window) >= self.period

    def reset(self) -> None:
        self._window.clear()
        self._weighted_sum = 0.0
        self._flat_sum = 0.0

    def warmup_periods(self) -> int:
        return self.period


class HullMovingAverage(Indicator):
    """
    Hull Moving Average.

      HMA = WMA(2 * WMA(x, period // 2) - WMA(x, period), int(sqrt(period)))

    `period` must be at least 2 so both inner windows are non-empty.
    """

    def __init__(self, period: int = 9):
        self.period = check_period("period", period)
        if period < 2:
            raise InvalidParameterError(f"period must be >= 2, got {period}")
        self._half_wma = WeightedMovingAverage(period // 2)
        self._full_wma = WeightedMovingAverage(period)
        self._hull_wma = WeightedMovingAverage(int(math.sqrt(period)))
        self._count: int = 0
        log.debug("Created %r", self)

    def update(self, value: float | HasClose) -> float:
        x = close_of(value)
        self._count += 1
        raw = 2.0 * self._half_wma.update(x) - self._full_wma.update(x)
        return self._hull_wma.update(raw)

    def ready(self) -> bool:
        # The outer window only holds complete inner values after this many inputs
        return self._count >= self.warmup_periods()

    def reset(self) -> None:
        self._half_wma.reset()
        self._full_wma.reset()
        self._hull_wma.reset()
        self._count = 0

    def warmup_periods(self) -> int:
        return self.period + int(math.sqrt(self.period)) - 1
