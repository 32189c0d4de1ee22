"""
Price envelope indicators: Bollinger Bands, Keltner Channel and Chandelier Exit.

Each is a thin combination of a center line and a width, both taken from
primitives that are updated once per input.
"""

import logging
from dataclasses import dataclass

from streamta.marketdata import HasClose, HasHighLowClose
from .atr import AverageTrueRange
from .base import Indicator, check_period, check_positive, close_of
from .ema import ExponentialMovingAverage
from .extrema import Maximum, Minimum
from .sma import StandardDeviation

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class BollingerBandsOutput:
    lower: float
    middle: float
    upper: float


@dataclass(frozen=True)
class KeltnerChannelOutput:
    lower: float
    middle: float
    upper: float


@dataclass(frozen=True)
class ChandelierExitOutput:
    long: float
    short: float


class BollingerBands(Indicator):
    """
    Bollinger Bands (rolling SMA +/- k * population standard deviation).

    Returns BollingerBandsOutput:
      - middle: SMA
      - upper:  middle + k * std
      - lower:  middle - k * std

    Notes:
    - The standard deviation is population (ddof=0) and is computed over the
      same window as the middle band, so both divide by the same count.
    """

    PARAMS = ("period", "multiplier")

    def __init__(self, period: int = 20, multiplier: float = 2.0):
        self.period = check_period("period", period)
        self.multiplier = check_positive("multiplier", multiplier)
        self._std = StandardDeviation(period)
        log.debug("Created %r", self)

    def update(self, value: float | HasClose) -> BollingerBandsOutput:
        std = self._std.update(close_of(value))
        middle = self._std.mean
        width = self.multiplier * std
        return BollingerBandsOutput(lower=middle - width, middle=middle, upper=middle + width)

    def ready(self) -> bool:
        return self._std.ready()

    def reset(self) -> None:
        self._std.reset()

    def warmup_periods(self) -> int:
        return self.period


class KeltnerChannel(Indicator):
    """
    Keltner Channel.

      middle = EMA(close, period)
      upper  = middle + k * ATR(period)
      lower  = middle - k * ATR(period)

    ATR needs high/low/close; fed plain numbers it degrades to the average
    absolute change between consecutive values.
    """

    PARAMS = ("period", "multiplier")

    def __init__(self, period: int = 10, multiplier: float = 2.0):
        self.period = check_period("period", period)
        self.multiplier = check_positive("multiplier", multiplier)
        self._ema = ExponentialMovingAverage(period)
        self._atr = AverageTrueRange(period)
        log.debug("Created %r", self)

    def update(self, value: float | HasHighLowClose) -> KeltnerChannelOutput:
        middle = self._ema.update(close_of(value))
        width = self.multiplier * self._atr.update(value)
        return KeltnerChannelOutput(lower=middle - width, middle=middle, upper=middle + width)

    def ready(self) -> bool:
        return self._ema.ready() and self._atr.ready()

    def reset(self) -> None:
        self._ema.reset()
        self._atr.reset()

    def warmup_periods(self) -> int:
        return self.period


class ChandelierExit(Indicator):
    """
    Chandelier Exit.

      long  = highest high(period) - k * ATR(period)
      short = lowest low(period)   + k * ATR(period)

    `long` is the trailing stop for long positions, `short` for shorts.
    """

    PARAMS = ("period", "multiplier")

    def __init__(self, period: int = 22, multiplier: float = 3.0):
        self.period = check_period("period", period)
        self.multiplier = check_positive("multiplier", multiplier)
        self._atr = AverageTrueRange(period)
        self._highest = Maximum(period)
        self._lowest = Minimum(period)
        log.debug("Created %r", self)

    def update(self, quote: HasHighLowClose) -> ChandelierExitOutput:
        offset = self.multiplier * self._atr.update(quote)
        highest = self._highest.update(quote)
        lowest = self._lowest.update(quote)
        return ChandelierExitOutput(long=highest - offset, short=lowest + offset)

    def ready(self) -> bool:
        return self._atr.ready()

    def reset(self) -> None:
        self._atr.reset()
        self._highest.reset()
        self._lowest.reset()

    def warmup_periods(self) -> int:
        return self.period
