# streamta/marketdata.py
"""
Market data records consumed by indicators.

A Quote is one immutable OHLCV observation. Indicators that only need some of
its fields declare that through the protocols below, so any object exposing
the right attributes (a Quote, a broker candle, a namedtuple) can be fed in.
"""

import math
from dataclasses import dataclass
from typing import Protocol

from .errors import InvalidQuoteError


class HasClose(Protocol):
    close: float


class HasHigh(Protocol):
    high: float


class HasLow(Protocol):
    low: float


class HasHighLowClose(Protocol):
    high: float
    low: float
    close: float


class HasCloseVolume(Protocol):
    close: float
    volume: float


class HasHighLowCloseVolume(Protocol):
    high: float
    low: float
    close: float
    volume: float


@dataclass(frozen=True)
class Quote:
    """
    A single OHLCV observation.

    Attributes:
        open: Opening price
        high: Highest price during the period
        low: Lowest price during the period
        close: Closing price
        volume: Traded volume (>= 0)
        timestamp: Optional label for the period, only read by VWAP to detect a new UTC day

    Raises:
        InvalidQuoteError: if a field is not finite, high < low, or volume < 0
    """

    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0
    timestamp: str = ""

    def __post_init__(self) -> None:
        for name in ("open", "high", "low", "close", "volume"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidQuoteError(f"{name} must be a real number, got {value!r}")
            if not math.isfinite(value):
                raise InvalidQuoteError(f"{name} must be finite, got {value!r}")

        if self.high < self.low:
            raise InvalidQuoteError(
                f"high ({self.high}) must be >= low ({self.low})"
            )
        if self.volume < 0:
            raise InvalidQuoteError(f"volume must be >= 0, got {self.volume}")

    @property
    def typical_price(self) -> float:
        """Typical price (HLC/3), used by CCI and Money Flow Index."""
        return (self.high + self.low + self.close) / 3

    @property
    def mid(self) -> float:
        """Midpoint between high and low."""
        return (self.high + self.low) / 2

    @property
    def range(self) -> float:
        """Quote range (high - low)."""
        return self.high - self.low

    def __repr__(self) -> str:
        return (
            f"Quote(O={self.open:.5f}, H={self.high:.5f}, "
            f"L={self.low:.5f}, C={self.close:.5f}, "
            f"V={self.volume:.0f})"
        )
