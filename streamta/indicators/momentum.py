"""Lag-based momentum indicators: Rate of Change and Kaufman's Efficiency Ratio."""

import logging
from collections import deque

from streamta.marketdata import HasClose
from .base import Indicator, check_period, close_of

log = logging.getLogger(__name__)


class RateOfChange(Indicator):
    """
    Rate of Change (ROC), in percent.

      ROC = 100 * (x - x[period ago]) / x[period ago]

    Until `period` earlier values exist, the oldest value seen is the
    reference, so the first input returns 0.0. A reference value of 0.0
    also returns 0.0.
    """

    def __init__(self, period: int = 9):
        self.period = check_period("period", period)
        self._prices: deque[float] = deque(maxlen=period + 1)
        log.debug("Created %r", self)

    def update(self, value: float | HasClose) -> float:
        x = close_of(value)
        self._prices.append(x)

        reference = self._prices[0]
        if reference == 0.0:
            return 0.0
        return (x - reference) / reference * 100.0

    def ready(self) -> bool:
        return len(self._prices) > self.period

    def reset(self) -> None:
        self._prices.clear()

    def warmup_periods(self) -> int:
        return self.period + 1


class EfficiencyRatio(Indicator):
    """
    Kaufman's Efficiency Ratio (range: 0 to 1).

      direction  = |x - x[period ago]|
      volatility = sum of |x_i - x_(i-1)| over the last `period` changes
      ER         = direction / volatility

    During warm-up the oldest value seen is the reference. When volatility
    is zero (a single input, or an unchanged series) ER is 1.0.

    Volatility is a running sum over a deque of absolute changes; the count
    of non-zero changes snaps it back to exactly 0.0 when they have all
    left the window.
    """

    def __init__(self, period: int = 14):
        self.period = check_period("period", period)
        self._prices: deque[float] = deque(maxlen=period + 1)
        self._changes: deque[float] = deque(maxlen=period)
        self._volatility: float = 0.0
        self._moving: int = 0
        log.debug("Created %r", self)

    def update(self, value: float | HasClose) -> float:
        x = close_of(value)

        if self._prices:
            change = abs(x - self._prices[-1])
            if len(self._changes) == self.period:
                evicted = self._changes[0]
                if evicted != 0.0:
                    self._moving -= 1
                    self._volatility = self._volatility - evicted if self._moving else 0.0
            self._changes.append(change)
            if change != 0.0:
                self._moving += 1
                self._volatility += change

        self._prices.append(x)

        if self._volatility == 0.0:
            return 1.0

        direction = abs(x - self._prices[0])
        return min(direction / self._volatility, 1.0)

    def ready(self) -> bool:
        return len(self._prices) > self.period

    def reset(self) -> None:
        self._prices.clear()
        self._changes.clear()
        self._volatility = 0.0
        self._moving = 0

    def warmup_periods(self) -> int:
        return self.period + 1
