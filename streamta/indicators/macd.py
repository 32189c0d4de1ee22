"""
MACD (Moving Average Convergence Divergence) and PPO (Percentage Price
Oscillator) indicator implementations.

MACD is a trend-following momentum indicator that shows the relationship
between two moving averages of prices. PPO is the same difference expressed
as a percentage of the slow average.
"""

import abc
import logging
from dataclasses import dataclass

from streamta.errors import InvalidParameterError
from streamta.marketdata import HasClose
from .base import Indicator, check_period, close_of
from .ema import ExponentialMovingAverage

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class MACDOutput:
    macd: float
    signal: float
    histogram: float


@dataclass(frozen=True)
class PPOOutput:
    ppo: float
    signal: float
    histogram: float


class _DualEMAOscillator(Indicator):
    """Fast/slow EMA pair plus a signal EMA of the line they produce."""

    PARAMS = ("fast_period", "slow_period", "signal_period")

    def __init__(self, fast: int = 12, slow: int = 26, signal: int = 9):
        self.fast_period = check_period("fast", fast)
        self.slow_period = check_period("slow", slow)
        self.signal_period = check_period("signal", signal)
        if fast >= slow:
            raise InvalidParameterError(
                f"fast period ({fast}) must be smaller than slow period ({slow})"
            )

        self._fast_ema = ExponentialMovingAverage(fast)
        self._slow_ema = ExponentialMovingAverage(slow)
        self._signal_ema = ExponentialMovingAverage(signal)
        self._count: int = 0
        log.debug("Created %r", self)

    @abc.abstractmethod
    def _line(self, fast: float, slow: float) -> float:
        raise NotImplementedError

    def _step(self, value: float | HasClose) -> tuple[float, float, float]:
        close = close_of(value)
        self._count += 1
        line = self._line(self._fast_ema.update(close), self._slow_ema.update(close))
        signal = self._signal_ema.update(line)
        return line, signal, line - signal

    def ready(self) -> bool:
        """
        Check if indicator has enough data.

        Returns:
            True once the slow EMA and the signal line have both warmed up
        """
        return self._count >= self.warmup_periods()

    def reset(self) -> None:
        """Clear all stored data."""
        self._fast_ema.reset()
        self._slow_ema.reset()
        self._signal_ema.reset()
        self._count = 0

    def warmup_periods(self) -> int:
        return self.slow_period + self.signal_period - 1


class MACD(_DualEMAOscillator):
    """
    MACD (Moving Average Convergence Divergence) indicator.

    Components:
        - MACD Line: Fast EMA - Slow EMA
        - Signal Line: EMA of MACD Line
        - Histogram: MACD Line - Signal Line

    Signals:
        - MACD crosses above signal: Bullish
        - MACD crosses below signal: Bearish
        - Histogram expanding: Trend strengthening
        - Histogram contracting: Trend weakening

    Args:
        fast: Fast EMA period (default: 12)
        slow: Slow EMA period (default: 26), must be greater than fast
        signal: Signal line EMA period (default: 9)

    Example:
        macd = MACD(fast=12, slow=26, signal=9)

        for quote in quotes:
            values = macd.update(quote)
            if macd.ready() and values.histogram > 0:
                print("Bullish momentum")
    """

    def _line(self, fast: float, slow: float) -> float:
        return fast - slow

    def update(self, value: float | HasClose) -> MACDOutput:
        line, signal, histogram = self._step(value)
        return MACDOutput(macd=line, signal=signal, histogram=histogram)


class PercentagePriceOscillator(_DualEMAOscillator):
    """
    Percentage Price Oscillator.

      PPO       = 100 * (Fast EMA - Slow EMA) / Slow EMA
      Signal    = EMA of PPO
      Histogram = PPO - Signal

    A slow EMA of exactly zero gives PPO = 0.0.
    """

    def _line(self, fast: float, slow: float) -> float:
        if slow == 0.0:
            return 0.0
        return (fast - slow) / slow * 100.0

    def update(self, value: float | HasClose) -> PPOOutput:
        line, signal, histogram = self._step(value)
        return PPOOutput(ppo=line, signal=signal, histogram=histogram)
