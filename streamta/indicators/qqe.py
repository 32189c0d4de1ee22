"""Quantitative Qualitative Estimation (QQE) indicator implementation."""

import logging
from dataclasses import dataclass

from streamta.errors import InvalidParameterError
from streamta.marketdata import HasClose
from .base import Indicator, check_period, check_positive, close_of
from .ema import ExponentialMovingAverage
from .rsi import RelativeStrengthIndex

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class QQEOutput:
    rsi_ma: float
    combined: float
    upper_band: float
    lower_band: float


class QuantitativeQualitativeEstimation(Indicator):
    """
    QQE: a smoothed RSI with two trailing bands around it.

      rsi_ma   = EMA(RSI(period), smooth_period)
      rsi_tr   = |rsi_ma - previous rsi_ma|
      gap      = EMA(EMA(rsi_tr, w), w) * multiplier,  w = 2 * period - 1
      upper    = rsi_ma + gap, held at the previous upper band while rsi_ma
                 stays above it and the new band would be lower
      lower    = rsi_ma - gap, held likewise from below

    The trend flips to long when rsi_ma crosses the lower band and to short
    when it crosses the upper band. `combined` is the upper band while long
    and the lower band while short.

    Before the first input the previous rsi_ma is 50.0, both bands are 0.0
    and the trend is long, so the first output is (50, 50, 50, 50).
    """

    PARAMS = ("period", "smooth_period", "multiplier")

    def __init__(self, period: int = 14, smooth_period: int = 5, multiplier: float = 4.236):
        self.period = check_period("period", period)
        self.smooth_period = check_period("smooth_period", smooth_period)
        self.multiplier = check_positive("multiplier", multiplier)
        if self.multiplier < 1.0:
            raise InvalidParameterError(f"multiplier must be >= 1, got {multiplier}")
        self.wilders_period = 2 * period - 1

        self._rsi = RelativeStrengthIndex(period)
        self._rsi_smoother = ExponentialMovingAverage(smooth_period)
        self._range_smoother = ExponentialMovingAverage(self.wilders_period)
        self._gap_smoother = ExponentialMovingAverage(self.wilders_period)

        self._last_rsi_ma: float = 50.0
        self._last_upper: float = 0.0
        self._last_lower: float = 0.0
        self._long: bool = True
        self._count: int = 0
        log.debug("Created %r", self)

    def update(self, value: float | HasClose) -> QQEOutput:
        self._count += 1
        rsi_ma = self._rsi_smoother.update(self._rsi.update(close_of(value)))

        rsi_tr = abs(self._last_rsi_ma - rsi_ma)
        gap = self._gap_smoother.update(self._range_smoother.update(rsi_tr)) * self.multiplier

        last_ma, last_upper, last_lower = self._last_rsi_ma, self._last_upper, self._last_lower

        upper = rsi_ma + gap
        if last_ma > last_upper and rsi_ma > last_upper and upper < last_upper:
            upper = last_upper

        lower = rsi_ma - gap
        if last_ma < last_lower and rsi_ma < last_lower and lower > last_lower:
            lower = last_lower

        if (rsi_ma > lower and last_ma < last_lower) or (rsi_ma <= lower and last_ma >= last_lower):
            self._long = True
        elif (rsi_ma > upper and last_ma < last_upper) or (rsi_ma <= upper and last_ma >= last_upper):
            self._long = False

        self._last_rsi_ma = rsi_ma
        self._last_upper = upper
        self._last_lower = lower

        return QQEOutput(
            rsi_ma=rsi_ma,
            combined=upper if self._long else lower,
            upper_band=upper,
            lower_band=lower,
        )

    def ready(self) -> bool:
        return self._count >= self.warmup_periods()

    def reset(self) -> None:
        self._rsi.reset()
        self._rsi_smoother.reset()
        self._range_smoother.reset()
        self._gap_smoother.reset()
        self._last_rsi_ma = 50.0
        self._last_upper = 0.0
        self._last_lower = 0.0
        self._long = True
        self._count = 0

    def warmup_periods(self) -> int:
        # RSI, its smoother and the two band-width smoothers fill one after another
        return self.period + 1 + (self.smooth_period - 1) + 2 * (self.wilders_period - 1)
