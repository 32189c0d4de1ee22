"""Relative Strength Index (RSI) indicator."""

import logging

from streamta.marketdata import HasClose
from .base import Indicator, check_period, close_of
from .ema import ExponentialMovingAverage

log = logging.getLogger(__name__)

# Gain and loss fed to both averages on the first input, which has no
# previous close to compare with
SEED_MOVE = 0.1


class RelativeStrengthIndex(Indicator):
    """
    Relative Strength Index (RSI).

    RSI = 100 * avg_gain / (avg_gain + avg_loss)
        = 100 - (100 / (1 + RS)),  RS = avg_gain / avg_loss

    Implementation:
      - gain = max(close - prev_close, 0), loss = max(prev_close - close, 0)
      - avg_gain/avg_loss are exponential moving averages (alpha = 2 / (period + 1))
      - The first input has no previous close; both averages are seeded with
        the same small move (SEED_MOVE), so it returns 50.0 and avg_loss
        stays above zero afterwards
      - avg_loss == 0 (only reachable through underflow) returns 100.0
    """

    def __init__(self, period: int = 14):
        self.period = check_period("period", period)
        self._prev_close: float | None = None
        self._count: int = 0
        self._avg_gain = ExponentialMovingAverage(period)
        self._avg_loss = ExponentialMovingAverage(period)
        log.debug("Created %r", self)

    def update(self, value: float | HasClose) -> float:
        close = close_of(value)
        self._count += 1

        if self._prev_close is None:
            gain = loss = SEED_MOVE
        else:
            delta = close - self._prev_close
            gain = max(delta, 0.0)
            loss = max(-delta, 0.0)
        self._prev_close = close

        return self._compute_rsi(self._avg_gain.update(gain), self._avg_loss.update(loss))

    @staticmethod
    def _compute_rsi(avg_gain: float, avg_loss: float) -> float:
        if avg_loss == 0.0:
            return 100.0
        return 100.0 * avg_gain / (avg_gain + avg_loss)

    def ready(self) -> bool:
        return self._count >= self.warmup_periods()

    def reset(self) -> None:
        self._prev_close = None
        self._count = 0
        self._avg_gain.reset()
        self._avg_loss.reset()

    def warmup_periods(self) -> int:
        # Need period deltas -> period + 1 inputs
        return self.period + 1
