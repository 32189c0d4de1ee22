import random

import numpy as np
import pytest

from streamta.errors import InvalidParameterError
from streamta.indicators.extrema import Maximum, Minimum, _RollingExtremum
from streamta.marketdata import Quote


def bar(high: float, low: float) -> Quote:
    return Quote(open=low, high=high, low=low, close=high, volume=1.0)


class TestMinimum:
    def test_rejects_non_positive_period(self) -> None:
        with pytest.raises(InvalidParameterError):
            Minimum(period=0)

        with pytest.raises(ValueError):
            Minimum(period=-1)

    def test_known_sequence(self) -> None:
        minimum = Minimum(period=3)
        out = [minimum.update(x) for x in [5.0, 3.0, 8.0, 1.0, 9.0, 2.0]]
        assert out == [5.0, 3.0, 3.0, 1.0, 1.0, 1.0]

    def test_evicts_oldest_value(self) -> None:
        minimum = Minimum(period=3)
        out = [minimum.update(x) for x in [4.0, 1.2, 5.0, 3.0, 4.0, 6.0, 7.0, 8.0, -9.0, 0.0]]
        assert out == [4.0, 1.2, 1.2, 1.2, 3.0, 3.0, 4.0, 6.0, -9.0, -9.0]

    def test_uses_low_of_quote(self) -> None:
        minimum = Minimum(period=3)
        assert minimum.update(bar(10.0, 4.0)) == 4.0
        assert minimum.update(bar(10.0, 4.0)) == 4.0
        assert minimum.update(bar(10.0, 1.2)) == 1.2
        assert minimum.update(bar(10.0, 5.0)) == 1.2

    def test_repeated_equal_values(self) -> None:
        minimum = Minimum(period=2)
        out = [minimum.update(x) for x in [1.0, 1.0, 1.0, 2.0, 2.0]]
        assert out == [1.0, 1.0, 1.0, 1.0, 2.0]

    def test_ready_and_reset(self) -> None:
        minimum = Minimum(period=10)
        assert minimum.update(5.0) == 5.0
        assert minimum.update(7.0) == 5.0
        assert minimum.ready() is False

        minimum.reset()
        assert minimum.update(8.0) == 8.0

    def test_repr(self) -> None:
        assert repr(Minimum(period=10)) == "Minimum(period=10)"


class TestMaximum:
    def test_rejects_non_positive_period(self) -> None:
        with pytest.raises(InvalidParameterError):
            Maximum(period=0)

    def test_known_sequence(self) -> None:
        maximum = Maximum(period=3)
        out = [maximum.update(x) for x in [5.0, 3.0, 8.0, 1.0, 9.0, 2.0]]
        assert out == [5.0, 5.0, 8.0, 8.0, 9.0, 9.0]

    def test_uses_high_of_quote(self) -> None:
        maximum = Maximum(period=2)
        assert maximum.update(bar(7.0, 1.0)) == 7.0
        assert maximum.update(bar(3.0, 1.0)) == 7.0
        assert maximum.update(bar(4.0, 1.0)) == 4.0

    def test_ready(self) -> None:
        maximum = Maximum(period=3)
        maximum.update(1.0)
        maximum.update(2.0)
        assert maximum.ready() is False
        maximum.update(3.0)
        assert maximum.ready() is True


class TestExtremaAgainstBruteForce:
    @pytest.mark.parametrize("period", [1, 2, 3, 5, 8, 13])
    @pytest.mark.parametrize("seed", range(5))
    def test_matches_window_recomputation(self, period: int, seed: int) -> None:
        rng = random.Random(seed)
        # Small integer range so ties are frequent
        values = [float(rng.randint(-10, 10)) for _ in range(200)]

        minimum = Minimum(period)
        maximum = Maximum(period)
        arr = np.array(values)

        for i, x in enumerate(values):
            window = arr[max(0, i - period + 1): i + 1]
            assert minimum.update(x) == window.min()
            assert maximum.update(x) == window.max()

    def test_identical_values(self) -> None:
        minimum = Minimum(4)
        maximum = Maximum(4)
        for _ in range(4):
            lo = minimum.update(2.5)
            hi = maximum.update(2.5)
        assert lo == 2.5
        assert hi == 2.5


class TestRollingExtremumBase:
    def test_subclass_must_define_ordering(self) -> None:
        class Unordered(_RollingExtremum):
            def update(self, value):
                return self._push(value)

        with pytest.raises(TypeError):
            Unordered(3)
