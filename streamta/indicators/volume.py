"""Volume indicators: Money Flow Index (MFI), On-Balance Volume (OBV) and VWAP."""

import logging
from collections import deque

from streamta.marketdata import HasCloseVolume, HasHighLowCloseVolume
from .base import Indicator, check_period

log = logging.getLogger(__name__)


class MoneyFlowIndex(Indicator):
    """
    Money Flow Index - volume-weighted momentum (range: 0 to 100).

      TP       = (high + low + close) / 3
      flow     = TP * volume, positive if TP rose or stayed unchanged,
                 negative if it fell
      MFI      = 100 * positive_flow / (positive_flow + negative_flow)
                 over the last `period` flows

    Saturation:
      - first input (no previous TP): 50.0
      - no flow at all in the window (zero volume): 50.0
      - zero negative flow: 100.0

    Positive and negative totals are kept as running sums together with the
    number of non-zero entries behind each, so a total whose entries have all
    left the window is exactly 0.0 again.
    """

    def __init__(self, period: int = 14):
        self.period = check_period("period", period)
        self._prev_typical_price: float | None = None
        self._flows: deque[float] = deque(maxlen=period)
        self._positive_sum: float = 0.0
        self._negative_sum: float = 0.0
        self._positive_count: int = 0
        self._negative_count: int = 0
        log.debug("Created %r", self)

    def update(self, quote: HasHighLowCloseVolume) -> float:
        typical_price = (float(quote.high) + float(quote.low) + float(quote.close)) / 3.0

        if self._prev_typical_price is None:
            self._prev_typical_price = typical_price
            return 50.0

        raw_money_flow = typical_price * float(quote.volume)
        if typical_price >= self._prev_typical_price:
            flow = raw_money_flow
        else:
            flow = -raw_money_flow
        self._prev_typical_price = typical_price

        if len(self._flows) == self.period:
            self._remove(self._flows[0])
        self._flows.append(flow)
        self._add(flow)

        if self._negative_sum == 0.0:
            # If there is no flow at all, treat as neutral.
            if self._positive_sum == 0.0:
                return 50.0
            return 100.0

        return 100.0 * self._positive_sum / (self._positive_sum + self._negative_sum)

    def _add(self, flow: float) -> None:
        if flow > 0.0:
            self._positive_sum += flow
            self._positive_count += 1
        elif flow < 0.0:
            self._negative_sum -= flow
            self._negative_count += 1

    def _remove(self, flow: float) -> None:
        if flow > 0.0:
            self._positive_count -= 1
            self._positive_sum = self._positive_sum - flow if self._positive_count else 0.0
        elif flow < 0.0:
            self._negative_count -= 1
            self._negative_sum = self._negative_sum + flow if self._negative_count else 0.0

    def ready(self) -> bool:
        return len(self._flows) >= self.period

    def reset(self) -> None:
        self._prev_typical_price = None
        self._flows.clear()
        self._positive_sum = 0.0
        self._negative_sum = 0.0
        self._positive_count = 0
        self._negative_count = 0

    def warmup_periods(self) -> int:
        return self.period + 1


class OnBalanceVolume(Indicator):
    """
    On-Balance Volume.

    OBV starts at 0 with a previous close of 0.
      - If close > prev_close: OBV += volume
      - If close < prev_close: OBV -= volume
      - If close == prev_close: OBV unchanged

    So a first bar with a positive close adds its volume.
    """

    PARAMS = ()

    def __init__(self):
        self._prev_close: float = 0.0
        self._obv: float = 0.0
        self._count: int = 0

    def update(self, quote: HasCloseVolume) -> float:
        close = float(quote.close)
        vol = float(quote.volume)
        self._count += 1

        if close > self._prev_close:
            self._obv += vol
        elif close < self._prev_close:
            self._obv -= vol

        self._prev_close = close
        return self._obv

    def ready(self) -> bool:
        return self._count >= 1

    def reset(self) -> None:
        self._prev_close = 0.0
        self._obv = 0.0
        self._count = 0

    def warmup_periods(self) -> int:
        return 1


class VolumeWeightedAveragePrice(Indicator):
    """
    Cumulative VWAP, optionally restarted every UTC day.

    VWAP = sum(price * volume) / sum(volume)

    Price basis:
      - Uses typical price (H+L+C)/3 by default
      - Optional: use close-only

    Session reset:
      - With reset_daily_utc, the sums restart when the leading 'YYYY-MM-DD'
        of quote.timestamp changes. Quotes then need an ISO8601 timestamp.

    While the cumulative volume is zero there is nothing to weight by, and
    the current price is returned.
    """

    PARAMS = ("use_typical_price", "reset_daily_utc")

    def __init__(self, use_typical_price: bool = True, reset_daily_utc: bool = False):
        self.use_typical_price = bool(use_typical_price)
        self.reset_daily_utc = bool(reset_daily_utc)

        self._session_key: str | None = None
        self._cum_pv: float = 0.0
        self._cum_v: float = 0.0
        log.debug("Created %r", self)

    def update(self, quote: HasHighLowCloseVolume) -> float:
        if self.reset_daily_utc:
            session_key = str(quote.timestamp)[:10]  # "YYYY-MM-DD"
            if self._session_key is not None and session_key != self._session_key:
                log.debug("%r starting session %s", self, session_key)
                self._cum_pv = 0.0
                self._cum_v = 0.0
            self._session_key = session_key

        vol = float(quote.volume)
        if self.use_typical_price:
            price = (float(quote.high) + float(quote.low) + float(quote.close)) / 3.0
        else:
            price = float(quote.close)

        self._cum_pv += price * vol
        self._cum_v += vol

        if self._cum_v == 0.0:
            return price

        return self._cum_pv / self._cum_v

    def ready(self) -> bool:
        return self._cum_v > 0.0

    def reset(self) -> None:
        self._session_key = None
        self._cum_pv = 0.0
        self._cum_v = 0.0

    def warmup_periods(self) -> int:
        # First quote with non-zero volume yields a weighted value.
        return 1
