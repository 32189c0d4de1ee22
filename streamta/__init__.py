# streamta/__init__.py
"""
streamta - Streaming technical analysis indicators.

Indicators are updated one observation at a time and keep only a fixed-size
rolling state, so each update costs O(1) (O(period) for mean absolute
deviation and CCI) no matter how long the stream runs.

Quick start:
    from streamta import Quote
    from streamta.indicators import AverageTrueRange, SimpleMovingAverage

    sma = SimpleMovingAverage(period=20)
    atr = AverageTrueRange(period=14)

    for quote in quotes:
        sma.update(quote)        # uses quote.close
        atr.update(quote)        # uses high/low/close
"""

from .config import settings, load_indicator_config
from .errors import ConfigError, InvalidParameterError, InvalidQuoteError, StreamTAError
from .logconfig import configure_logging
from .marketdata import Quote

__version__ = "0.1.0"
__all__ = [
    "settings",
    "load_indicator_config",
    "configure_logging",
    "Quote",
    "StreamTAError",
    "InvalidParameterError",
    "InvalidQuoteError",
    "ConfigError",
]
