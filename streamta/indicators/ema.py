"""Exponential Moving Average (EMA) indicator implementation."""

import logging

from streamta.marketdata import HasClose
from .base import Indicator, check_period, close_of

log = logging.getLogger(__name__)


class ExponentialMovingAverage(Indicator):
    """
    Exponential Moving Average of close prices.

    alpha = 2 / (period + 1)

    The first input seeds the average unchanged; afterwards
    ema = alpha * x + (1 - alpha) * ema.
    """

    def __init__(self, period: int = 9):
        self.period = check_period("period", period)
        self.alpha = self._smoothing(period)
        self._ema: float | None = None
        self._count: int = 0
        log.debug("Created %r", self)

    @staticmethod
    def _smoothing(period: int) -> float:
        return 2.0 / (period + 1.0)

    @property
    def value(self) -> float | None:
        """Current smoothed value, None before the first update."""
        return self._ema

    def update(self, value: float | HasClose) -> float:
        x = close_of(value)
        self._count += 1

        if self._ema is None:
            # Seed EMA with first value
            self._ema = x
        else:
            self._ema = self.alpha * x + (1.0 - self.alpha) * self._ema

        return self._ema

    def ready(self) -> bool:
        return self._count >= self.period

    def reset(self) -> None:
        self._ema = None
        self._count = 0

    def warmup_periods(self) -> int:
        return self.period


class WilderMovingAverage(ExponentialMovingAverage):
    """
    Wilder's smoothing: an EMA with alpha = 1 / period.

    Equivalent to ema = (ema * (period - 1) + x) / period. Seeded with the
    first value like ExponentialMovingAverage.
    """

    @staticmethod
    def _smoothing(period: int) -> float:
        return 1.0 / period
