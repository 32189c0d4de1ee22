"""Stochastic Oscillator (%K / %D) and Williams %R indicator implementations."""

import logging
from dataclasses import dataclass

from streamta.marketdata import HasHighLowClose
from .base import Indicator, check_period, close_of
from .extrema import Maximum, Minimum
from .sma import SimpleMovingAverage

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class StochasticOutput:
    k: float
    d: float


class FastStochastic(Indicator):
    """
    Fast Stochastic %K.

    %K = 100 * (close - lowest_low) / (highest_high - lowest_low) over `period`

    Notes:
    - For quotes the window tracks highs and lows; plain numbers serve as
      high, low and close at once.
    - If highest_high == lowest_low (including the very first input), %K is
      defined as 50.0.
    """

    def __init__(self, period: int = 14):
        self.period = check_period("period", period)
        self._highest = Maximum(period)
        self._lowest = Minimum(period)
        log.debug("Created %r", self)

    def update(self, value: float | HasHighLowClose) -> float:
        highest = self._highest.update(value)
        lowest = self._lowest.update(value)
        close = close_of(value)

        denom = highest - lowest
        if denom == 0.0:
            return 50.0
        return 100.0 * (close - lowest) / denom

    def ready(self) -> bool:
        return self._highest.ready()

    def reset(self) -> None:
        self._highest.reset()
        self._lowest.reset()

    def warmup_periods(self) -> int:
        return self.period


class SlowStochastic(Indicator):
    """
    Slow Stochastic Oscillator.

    %K = SMA(fast %K, k_period)
    %D = SMA(%K, d_period)

    Returns StochasticOutput(k, d).
    """

    PARAMS = ("period", "k_period", "d_period")

    def __init__(self, period: int = 14, k_period: int = 3, d_period: int = 3):
        self.period = check_period("period", period)
        self.k_period = check_period("k_period", k_period)
        self.d_period = check_period("d_period", d_period)

        self._fast = FastStochastic(period)
        self._k = SimpleMovingAverage(k_period)
        self._d = SimpleMovingAverage(d_period)
        self._count: int = 0
        log.debug("Created %r", self)

    def update(self, value: float | HasHighLowClose) -> StochasticOutput:
        self._count += 1
        k = self._k.update(self._fast.update(value))
        d = self._d.update(k)
        return StochasticOutput(k=k, d=d)

    def ready(self) -> bool:
        return self._count >= self.warmup_periods()

    def reset(self) -> None:
        self._fast.reset()
        self._k.reset()
        self._d.reset()
        self._count = 0

    def warmup_periods(self) -> int:
        # Need period inputs for the first full %K window, then the two SMA windows
        return self.period + self.k_period + self.d_period - 2


class WilliamsR(Indicator):
    """
    Williams %R momentum indicator (range: -100 to 0).

    %R = -100 * (highest_high - close) / (highest_high - lowest_low)

    -50.0 when highest_high == lowest_low.
    """

    def __init__(self, period: int = 14):
        self.period = check_period("period", period)
        self._highest = Maximum(period)
        self._lowest = Minimum(period)
        log.debug("Created %r", self)

    def update(self, quote: HasHighLowClose) -> float:
        highest = self._highest.update(quote)
        lowest = self._lowest.update(quote)

        if highest == lowest:
            return -50.0

        return ((highest - float(quote.close)) / (highest - lowest)) * -100.0

    def ready(self) -> bool:
        return self._highest.ready()

    def reset(self) -> None:
        self._highest.reset()
        self._lowest.reset()

    def warmup_periods(self) -> int:
        return self.period
