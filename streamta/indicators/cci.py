"""Commodity Channel Index (CCI) indicator implementation."""

import logging

from streamta.marketdata import HasHighLowClose
from .base import Indicator, check_period, check_positive, typical_price_of
from .sma import MeanAbsoluteDeviation

log = logging.getLogger(__name__)


class CommodityChannelIndex(Indicator):
    """
    Commodity Channel Index (CCI).

    TP  = (high + low + close) / 3
    SMA = mean(TP over period)
    MD  = mean(|TP_i - SMA|)
    CCI = (TP - SMA) / (constant * MD)

    Notes:
    - Uses mean deviation (not std); the SMA is the mean of the deviation
      window, so both refer to the same values.
    - If MD == 0, returns 0.0 to avoid division-by-zero.
    - Plain numbers are used directly as the typical price.
    """

    PARAMS = ("period", "constant")

    def __init__(self, period: int = 20, constant: float = 0.015):
        self.period = check_period("period", period)
        self.constant = check_positive("constant", constant)
        self._deviation = MeanAbsoluteDeviation(period)
        log.debug("Created %r", self)

    def update(self, value: float | HasHighLowClose) -> float:
        tp = typical_price_of(value)
        mean_dev = self._deviation.update(tp)

        if mean_dev == 0.0:
            return 0.0

        return (tp - self._deviation.mean) / (self.constant * mean_dev)

    def ready(self) -> bool:
        return self._deviation.ready()

    def reset(self) -> None:
        self._deviation.reset()

    def warmup_periods(self) -> int:
        return self.period
