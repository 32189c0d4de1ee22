# tests/conftest.py
import random

import pytest

from streamta.marketdata import Quote


def make_quote(i: int) -> Quote:
    """
    Deterministic quote series with monotonically increasing prices.
    """
    base = 100.0 + i
    return Quote(
        open=base,
        high=base + 0.5,
        low=base - 0.5,
        close=base + 0.2,
        volume=1000.0,
        timestamp=f"2025-01-01T00:{i % 60:02d}:00Z",
    )


def random_quotes(n: int, seed: int = 7) -> list[Quote]:
    """Random walk of quotes with valid high/low and non-negative volume."""
    rng = random.Random(seed)
    price = 100.0
    quotes = []
    for _ in range(n):
        open_ = price
        close = max(1.0, price + rng.uniform(-2.0, 2.0))
        high = max(open_, close) + rng.uniform(0.0, 1.0)
        low = min(open_, close) - rng.uniform(0.0, 1.0)
        volume = rng.uniform(0.0, 5000.0)
        quotes.append(Quote(open=open_, high=high, low=low, close=close, volume=volume))
        price = close
    return quotes


@pytest.fixture
def quote_factory():
    """
    Returns a function: (i:int) -> Quote
    """
    return make_quote


@pytest.fixture
def make_quotes(quote_factory):
    """
    Returns a function: (n:int, start:int=0) -> list[Quote]
    """
    def _make(n: int, start: int = 0) -> list[Quote]:
        return [quote_factory(i) for i in range(start, start + n)]

    return _make


@pytest.fixture
def random_walk():
    """
    Returns a function: (n:int, seed:int=7) -> list[Quote]
    """
    return random_quotes
