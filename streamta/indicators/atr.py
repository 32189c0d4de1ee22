"""True Range and Average True Range (ATR) indicator implementation (Wilder)."""

import logging

from streamta.marketdata import HasHighLowClose
from .base import Indicator, check_period
from .ema import WilderMovingAverage

log = logging.getLogger(__name__)


class TrueRange(Indicator):
    """
    True Range (TR).

      TR = max(
        high - low,
        abs(high - prev_close),
        abs(low - prev_close),
      )

    The first quote has no previous close, so TR = high - low. A plain number
    is treated as a quote whose high, low and close are all that number,
    which reduces TR to abs(x - prev) (0 for the first value).
    """

    PARAMS = ()

    def __init__(self):
        self._prev_close: float | None = None

    def update(self, value: float | HasHighLowClose) -> float:
        if isinstance(value, (int, float)):
            high = low = close = float(value)
        else:
            high = float(value.high)
            low = float(value.low)
            close = float(value.close)

        if self._prev_close is None:
            tr = high - low
        else:
            tr = max(
                high - low,
                abs(high - self._prev_close),
                abs(low - self._prev_close),
            )

        self._prev_close = close
        return tr

    def ready(self) -> bool:
        return self._prev_close is not None

    def reset(self) -> None:
        self._prev_close = None

    def warmup_periods(self) -> int:
        return 1


class AverageTrueRange(Indicator):
    """
    ATR (Average True Range) using Wilder's smoothing.

    ATR = Wilder moving average of True Range, i.e. an EMA with
    alpha = 1 / period (not 2 / (period + 1)), seeded with the first TR.
    """

    def __init__(self, period: int = 14):
        self.period = check_period("period", period)
        self._true_range = TrueRange()
        self._average = WilderMovingAverage(period)
        log.debug("Created %r", self)

    def update(self, value: float | HasHighLowClose) -> float:
        return self._average.update(self._true_range.update(value))

    def ready(self) -> bool:
        return self._average.ready()

    def reset(self) -> None:
        self._true_range.reset()
        self._average.reset()

    def warmup_periods(self) -> int:
        return self.period
