import pytest

from streamta.errors import InvalidParameterError
from streamta.indicators.stochastic import (
    FastStochastic,
    SlowStochastic,
    StochasticOutput,
    WilliamsR,
)
from streamta.marketdata import Quote


def hlc(high: float, low: float, close: float) -> Quote:
    return Quote(open=close, high=high, low=low, close=close, volume=1.0)


class TestFastStochastic:
    def test_rejects_non_positive_period(self) -> None:
        with pytest.raises(InvalidParameterError):
            FastStochastic(period=0)

    def test_scalars(self) -> None:
        stoch = FastStochastic(period=3)
        assert stoch.update(0.0) == 50.0
        assert stoch.update(200.0) == 100.0
        assert stoch.update(100.0) == 50.0
        assert stoch.update(120.0) == pytest.approx(20.0)
        assert stoch.update(115.0) == pytest.approx(75.0)

    def test_quotes(self) -> None:
        stoch = FastStochastic(period=3)
        assert stoch.update(hlc(20.0, 20.0, 20.0)) == 50.0
        assert stoch.update(hlc(30.0, 10.0, 25.0)) == pytest.approx(75.0)
        assert stoch.update(hlc(40.0, 20.0, 16.0)) == pytest.approx(20.0)
        assert stoch.update(hlc(35.0, 15.0, 19.0)) == pytest.approx(30.0)

    def test_reset(self) -> None:
        stoch = FastStochastic(period=10)
        assert stoch.update(hlc(20.0, 20.0, 20.0)) == 50.0
        assert stoch.update(hlc(30.0, 10.0, 25.0)) == pytest.approx(75.0)

        stoch.reset()
        assert stoch.update(hlc(40.0, 20.0, 30.0)) == pytest.approx(50.0)


class TestSlowStochastic:
    def test_rejects_invalid_periods(self) -> None:
        with pytest.raises(InvalidParameterError):
            SlowStochastic(period=0)
        with pytest.raises(InvalidParameterError):
            SlowStochastic(period=14, k_period=0)
        with pytest.raises(InvalidParameterError):
            SlowStochastic(period=14, k_period=3, d_period=-1)

    def test_smooths_fast_k(self) -> None:
        slow = SlowStochastic(period=3, k_period=2, d_period=2)
        # fast %K: 50, 100, 50, 20, 75
        assert slow.update(0.0) == StochasticOutput(k=50.0, d=50.0)
        assert slow.update(200.0) == StochasticOutput(k=75.0, d=62.5)

        out = slow.update(100.0)
        assert out.k == pytest.approx(75.0)
        assert out.d == pytest.approx(75.0)

        out = slow.update(120.0)
        assert out.k == pytest.approx(35.0)
        assert out.d == pytest.approx(55.0)

        out = slow.update(115.0)
        assert out.k == pytest.approx(47.5)
        assert out.d == pytest.approx(41.25)

    def test_ready_on_warmup_boundary(self, quote_factory) -> None:
        slow = SlowStochastic(period=14, k_period=3, d_period=3)
        warmup = slow.warmup_periods()
        assert warmup == 14 + 3 + 3 - 2

        for i in range(warmup - 1):
            slow.update(quote_factory(i))
            assert slow.ready() is False

        slow.update(quote_factory(warmup - 1))
        assert slow.ready() is True

    def test_bounded(self, random_walk) -> None:
        slow = SlowStochastic()
        for q in random_walk(300):
            out = slow.update(q)
            assert -1e-9 <= out.k <= 100.0 + 1e-9
            assert -1e-9 <= out.d <= 100.0 + 1e-9


class TestWilliamsR:
    def test_rejects_non_positive_period(self) -> None:
        with pytest.raises(InvalidParameterError):
            WilliamsR(period=0)

    def test_known_values(self) -> None:
        wr = WilliamsR(period=3)
        assert wr.update(hlc(20.0, 20.0, 20.0)) == -50.0
        assert wr.update(hlc(30.0, 10.0, 25.0)) == pytest.approx(-25.0)
        assert wr.update(hlc(40.0, 20.0, 16.0)) == pytest.approx(-80.0)

    def test_ready_on_warmup_boundary(self, quote_factory) -> None:
        wr = WilliamsR(period=14)
        warmup = wr.warmup_periods()

        for i in range(warmup - 1):
            wr.update(quote_factory(i))
            assert wr.ready() is False

        out = wr.update(quote_factory(warmup - 1))
        assert wr.ready() is True
        assert -100.0 <= out <= 0.0
