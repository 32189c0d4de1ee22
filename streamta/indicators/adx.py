"""Average Directional Index (ADX) indicator implementation (Wilder)."""

import logging
from dataclasses import dataclass

from streamta.marketdata import HasHighLowClose
from .atr import TrueRange
from .base import Indicator, check_period
from .ema import WilderMovingAverage

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ADXOutput:
    adx: float
    plus_di: float
    minus_di: float


class AverageDirectionalIndex(Indicator):
    """
    ADX (Average Directional Index), Wilder smoothing.

    Computes:
      +DI, -DI, ADX

    Directional Movement:
      up_move   = high - prev_high
      down_move = prev_low - low

      +DM = up_move   if up_move > down_move and up_move > 0 else 0
      -DM = down_move if down_move > up_move and down_move > 0 else 0

    +DM, -DM and True Range are each smoothed with Wilder's moving average:
      +DI = 100 * smoothed(+DM) / smoothed(TR)   (0 if smoothed TR == 0)
      -DI = 100 * smoothed(-DM) / smoothed(TR)

    DX:
      DX = 100 * abs(+DI - -DI) / (+DI + -DI)  (0 if denom == 0)

    ADX = Wilder moving average of DX.

    The first quote only records the previous high/low/close and returns
    all zeros.
    """

    def __init__(self, period: int = 14):
        self.period = check_period("period", period)

        self._prev_high: float | None = None
        self._prev_low: float | None = None
        self._count: int = 0

        self._true_range = TrueRange()
        self._tr = WilderMovingAverage(period)
        self._pdm = WilderMovingAverage(period)
        self._mdm = WilderMovingAverage(period)
        self._adx = WilderMovingAverage(period)
        log.debug("Created %r", self)

    def update(self, quote: HasHighLowClose) -> ADXOutput:
        high = float(quote.high)
        low = float(quote.low)
        self._count += 1

        tr = self._true_range.update(quote)

        if self._prev_high is None or self._prev_low is None:
            self._prev_high, self._prev_low = high, low
            return ADXOutput(adx=0.0, plus_di=0.0, minus_di=0.0)

        up_move = high - self._prev_high
        down_move = self._prev_low - low
        self._prev_high, self._prev_low = high, low

        pdm = up_move if (up_move > down_move and up_move > 0.0) else 0.0
        mdm = down_move if (down_move > up_move and down_move > 0.0) else 0.0

        plus_di, minus_di = self._compute_di(
            self._tr.update(tr), self._pdm.update(pdm), self._mdm.update(mdm)
        )
        adx = self._adx.update(self._compute_dx(plus_di, minus_di))
        return ADXOutput(adx=adx, plus_di=plus_di, minus_di=minus_di)

    @staticmethod
    def _compute_di(tr: float, pdm: float, mdm: float) -> tuple[float, float]:
        if tr == 0.0:
            return 0.0, 0.0
        return 100.0 * (pdm / tr), 100.0 * (mdm / tr)

    @staticmethod
    def _compute_dx(plus_di: float, minus_di: float) -> float:
        denom = plus_di + minus_di
        if denom == 0.0:
            return 0.0
        return 100.0 * abs(plus_di - minus_di) / denom

    def ready(self) -> bool:
        return self._count >= self.warmup_periods()

    def reset(self) -> None:
        self._prev_high = None
        self._prev_low = None
        self._count = 0

        self._true_range.reset()
        self._tr.reset()
        self._pdm.reset()
        self._mdm.reset()
        self._adx.reset()

    def warmup_periods(self) -> int:
        # Need `period` deltas to smooth TR/DM, then `period` DX values for ADX
        return 2 * self.period
