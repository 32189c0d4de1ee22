import pytest

from streamta.errors import InvalidParameterError
from streamta.indicators.atr import AverageTrueRange, TrueRange
from streamta.marketdata import Quote


def hlc(high: float, low: float, close: float) -> Quote:
    return Quote(open=close, high=high, low=low, close=close, volume=1.0)


class TestTrueRange:
    def test_first_quote_is_high_minus_low(self) -> None:
        tr = TrueRange()
        assert tr.update(hlc(10.0, 7.5, 9.0)) == pytest.approx(2.5)

    def test_uses_previous_close(self) -> None:
        tr = TrueRange()
        tr.update(hlc(10.0, 7.5, 9.0))
        # gap up: |high - prev_close| dominates
        assert tr.update(hlc(11.0, 10.0, 10.5)) == pytest.approx(2.0)
        # gap down: |low - prev_close| dominates
        assert tr.update(hlc(9.0, 7.0, 8.0)) == pytest.approx(3.5)
        # inside bar: high - low dominates
        assert tr.update(hlc(10.0, 6.0, 7.0)) == pytest.approx(4.0)

    def test_scalars(self) -> None:
        tr = TrueRange()
        assert tr.update(2.5) == 0.0
        assert tr.update(3.6) == pytest.approx(1.1)
        assert tr.update(3.3) == pytest.approx(0.3)

    def test_reset(self) -> None:
        tr = TrueRange()
        tr.update(hlc(10.0, 7.5, 9.0))
        tr.reset()
        assert tr.ready() is False
        assert tr.update(hlc(12.0, 11.0, 11.5)) == pytest.approx(1.0)


class TestATR:
    def test_rejects_non_positive_period(self) -> None:
        with pytest.raises(InvalidParameterError):
            AverageTrueRange(period=0)

        with pytest.raises(ValueError):
            AverageTrueRange(period=-3)

    def test_wilder_smoothing(self) -> None:
        atr = AverageTrueRange(period=3)

        # TR1 = 2.0 -> seed
        assert atr.update(hlc(10.0, 8.0, 9.0)) == pytest.approx(2.0)
        # TR2 = max(1.0, |11-9|, |10-9|) = 2.0 -> (2*2 + 2) / 3
        assert atr.update(hlc(11.0, 10.0, 10.5)) == pytest.approx(2.0)
        # TR3 = max(2.5, |12-10.5|, |9.5-10.5|) = 2.5 -> (2*2 + 2.5) / 3
        assert atr.update(hlc(12.0, 9.5, 11.0)) == pytest.approx(6.5 / 3.0)
        assert atr.ready() is True

    def test_not_standard_ema_coefficient(self) -> None:
        atr = AverageTrueRange(period=3)
        atr.update(hlc(10.0, 8.0, 9.0))  # TR 2.0
        v = atr.update(hlc(13.0, 9.0, 12.0))  # TR 4.0
        # alpha = 1/3, not 2/4
        assert v == pytest.approx(2.0 + (4.0 - 2.0) / 3.0)
        assert v != pytest.approx(3.0)

    def test_constant_range(self, make_quotes) -> None:
        atr = AverageTrueRange(period=5)
        for q in make_quotes(60):
            v = atr.update(q)
        # Every bar after the first has TR = max(1.0, |high - prev_close|=1.3, |low - prev_close|=0.3)
        assert v == pytest.approx(1.3, rel=1e-3)

    def test_reset(self) -> None:
        atr = AverageTrueRange(period=2)
        atr.update(hlc(10.0, 8.0, 9.0))
        atr.update(hlc(20.0, 8.0, 9.0))
        atr.reset()
        assert atr.ready() is False
        assert atr.update(hlc(5.0, 4.0, 4.5)) == pytest.approx(1.0)

    def test_warmup_periods(self) -> None:
        assert AverageTrueRange(period=14).warmup_periods() == 14
