"""Simple Moving Average and the dispersion measures that share its window."""

import logging
import math
from collections import deque

from streamta.marketdata import HasClose
from .base import Indicator, check_period, close_of

log = logging.getLogger(__name__)


class SimpleMovingAverage(Indicator):
    """
    Simple Moving Average of the last `period` values (close prices for quotes).

    Until the window is full the average is taken over the values seen so
    far, so the first update returns its input unchanged. The mean is kept
    incrementally:

      warm-up:  mean += (x - mean) / count
      full:     mean += (x - evicted) / period

    Running statistics collect rounding error from every value that has left
    the window. Two checks keep them tied to the current window only:

      - once the window holds a run of identical values, the statistics are
        set exactly (mean = value);
      - after every `period` evictions they are recomputed from the window,
        which costs O(period) once per `period` updates.
    """

    def __init__(self, period: int = 9):
        self.period = check_period("period", period)
        self._window: deque[float] = deque(maxlen=period)
        self._mean: float = 0.0
        self._run: int = 0
        self._evictions: int = 0
        log.debug("Created %r", self)

    @property
    def mean(self) -> float:
        return self._mean

    def _push(self, value: float) -> float | None:
        """Add `value` to the window and refresh the mean; return the evicted value, if any."""
        evicted = self._window[0] if len(self._window) == self.period else None
        self._window.append(value)

        if evicted is None:
            self._mean += (value - self._mean) / len(self._window)
        else:
            self._mean += (value - evicted) / self.period

        return evicted

    def _settle(self, value: float, evicted: float | None) -> None:
        """Drop accumulated rounding error once the window allows it."""
        if len(self._window) > 1 and self._window[-2] == value:
            self._run += 1
        else:
            self._run = 1

        if self._run >= len(self._window):
            self._flatten(value)
        elif evicted is not None:
            self._evictions += 1
            if self._evictions >= self.period:
                self._evictions = 0
                self._recompute()

    def _flatten(self, value: float) -> None:
        self._mean = value

    def _recompute(self) -> None:
        self._mean = math.fsum(self._window) / len(self._window)

    def update(self, value: float | HasClose) -> float:
        x = close_of(value)
        self._settle(x, self._push(x))
        return self._mean

    def ready(self) -> bool:
        return len(self._window) >= self.period

    def reset(self) -> None:
        self._window.clear()
        self._mean = 0.0
        self._run = 0
        self._evictions = 0

    def warmup_periods(self) -> int:
        return self.period


class StandardDeviation(SimpleMovingAverage):
    """
    Population standard deviation over the Simple Moving Average window.

    Divides by the number of values in the window, the same denominator the
    mean uses. The sum of squared deviations is updated in O(1) per value:

      warm-up:  m2 += (x - old_mean) * (x - new_mean)
      full:     m2 += (x - evicted) * (x - new_mean + evicted - old_mean)

    m2 is recomputed from the window together with the mean (see
    SimpleMovingAverage), and also whenever rounding has pushed it below
    zero. A window of identical values gives exactly 0.0.
    """

    def __init__(self, period: int = 9):
        self._m2: float = 0.0
        super().__init__(period)

    def update(self, value: float | HasClose) -> float:
        x = close_of(value)
        old_mean = self._mean
        evicted = self._push(x)

        if evicted is None:
            self._m2 += (x - old_mean) * (x - self._mean)
        else:
            self._m2 += (x - evicted) * (x - self._mean + evicted - old_mean)

        self._settle(x, evicted)
        if self._m2 < 0.0:
            self._recompute_m2()

        return math.sqrt(max(self._m2 / len(self._window), 0.0))

    def _flatten(self, value: float) -> None:
        super()._flatten(value)
        self._m2 = 0.0

    def _recompute(self) -> None:
        super()._recompute()
        self._recompute_m2()

    def _recompute_m2(self) -> None:
        mean = self._mean
        self._m2 = math.fsum((x - mean) ** 2 for x in self._window)

    def reset(self) -> None:
        super().reset()
        self._m2 = 0.0


class MeanAbsoluteDeviation(SimpleMovingAverage):
    """
    Mean absolute deviation from the window mean.

    MAD = mean(|x_i - mean|) over the window. There is no running form of
    this statistic, so each update walks the window: O(period).
    """

    def update(self, value: float | HasClose) -> float:
        x = close_of(value)
        self._settle(x, self._push(x))
        mean = self._mean
        return sum(abs(v - mean) for v in self._window) / len(self._window)
