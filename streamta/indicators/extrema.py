"""Rolling Minimum and Maximum over a fixed window."""

import abc
import logging
from collections import deque

from streamta.marketdata import HasHigh, HasLow
from .base import Indicator, check_period, high_of, low_of

log = logging.getLogger(__name__)


class _RollingExtremum(Indicator):
    """
    Extremum of the last `period` values in amortized O(1).

    Keeps a monotonic deque of (sequence number, value) pairs. A new value
    pops every older candidate it makes obsolete, including equal ones, so
    the newest of several equal values is the one that stays. The front
    entry is the extremum and is evicted once its sequence number falls
    out of the window.
    """

    def __init__(self, period: int = 14):
        self.period = check_period("period", period)
        self._candidates: deque[tuple[int, float]] = deque(maxlen=period)
        self._seen: int = 0
        log.debug("Created %r", self)

    @staticmethod
    @abc.abstractmethod
    def _obsoletes(new: float, old: float) -> bool:
        raise NotImplementedError

    def _push(self, value: float) -> float:
        seq = self._seen
        self._seen += 1

        while self._candidates and self._obsoletes(value, self._candidates[-1][1]):
            self._candidates.pop()

        if self._candidates and self._candidates[0][0] <= seq - self.period:
            self._candidates.popleft()

        self._candidates.append((seq, value))
        return self._candidates[0][1]

    def ready(self) -> bool:
        return self._seen >= self.period

    def reset(self) -> None:
        self._candidates.clear()
        self._seen = 0

    def warmup_periods(self) -> int:
        return self.period


class Minimum(_RollingExtremum):
    """Lowest value of the last `period` inputs (the low of a quote)."""

    @staticmethod
    def _obsoletes(new: float, old: float) -> bool:
        return new <= old

    def update(self, value: float | HasLow) -> float:
        return self._push(low_of(value))


class Maximum(_RollingExtremum):
    """Highest value of the last `period` inputs (the high of a quote)."""

    @staticmethod
    def _obsoletes(new: float, old: float) -> bool:
        return new >= old

    def update(self, value: float | HasHigh) -> float:
        return self._push(high_of(value))
