import math

import pytest

from streamta.errors import InvalidQuoteError
from streamta.marketdata import Quote


class TestQuote:
    def test_valid_quote(self) -> None:
        q = Quote(open=20.0, high=25.0, low=15.0, close=21.0, volume=7500.0)
        assert q.typical_price == pytest.approx((25.0 + 15.0 + 21.0) / 3)
        assert q.mid == pytest.approx(20.0)
        assert q.range == pytest.approx(10.0)

    def test_flat_and_zero_quotes_are_valid(self) -> None:
        Quote(open=10.0, high=10.0, low=10.0, close=10.0, volume=10.0)
        Quote(open=0.0, high=0.0, low=0.0, close=0.0, volume=0.0)

    def test_open_and_close_are_not_bounded_by_range(self) -> None:
        q = Quote(open=30.0, high=25.0, low=15.0, close=10.0)
        assert q.close == 10.0

    def test_rejects_high_below_low(self) -> None:
        with pytest.raises(InvalidQuoteError):
            Quote(open=20.0, high=14.0, low=15.0, close=21.0, volume=1.0)

    def test_rejects_negative_volume(self) -> None:
        with pytest.raises(InvalidQuoteError):
            Quote(open=20.0, high=25.0, low=15.0, close=21.0, volume=-1.0)

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_rejects_non_finite_fields(self, bad: float) -> None:
        with pytest.raises(InvalidQuoteError):
            Quote(open=bad, high=25.0, low=15.0, close=21.0)

    def test_rejects_non_numeric_fields(self) -> None:
        with pytest.raises(InvalidQuoteError):
            Quote(open="20", high=25.0, low=15.0, close=21.0)  # type: ignore[arg-type]

    def test_invalid_quote_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Quote(open=20.0, high=25.0, low=15.0, close=21.0, volume=-5.0)

    def test_is_immutable(self) -> None:
        q = Quote(open=1.0, high=2.0, low=0.5, close=1.5)
        with pytest.raises(AttributeError):
            q.close = 3.0  # type: ignore[misc]
