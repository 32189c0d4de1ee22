"""Base class for technical indicators."""

import abc
import logging
import math
from collections import deque
from typing import Any

from streamta.errors import InvalidParameterError
from streamta.marketdata import HasClose, HasHigh, HasHighLowClose, HasLow

log = logging.getLogger(__name__)


def check_period(name: str, value: int) -> int:
    """Return `value` if it is a usable window length, else raise InvalidParameterError."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidParameterError(f"{name} must be > 0, got {value}")
    return value


def check_positive(name: str, value: float) -> float:
    """Return `value` as a float if it is finite and > 0, else raise InvalidParameterError."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameterError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise InvalidParameterError(f"{name} must be > 0, got {value}")
    return float(value)


def close_of(value: float | HasClose) -> float:
    if isinstance(value, (int, float)):
        return float(value)
    return float(value.close)


def high_of(value: float | HasHigh) -> float:
    if isinstance(value, (int, float)):
        return float(value)
    return float(value.high)


def low_of(value: float | HasLow) -> float:
    if isinstance(value, (int, float)):
        return float(value)
    return float(value.low)


def typical_price_of(value: float | HasHighLowClose) -> float:
    if isinstance(value, (int, float)):
        return float(value)
    return (float(value.high) + float(value.low) + float(value.close)) / 3.0


class Indicator(abc.ABC):
    """
    Abstract base class for all technical indicators.

    Configuration lives in public attributes and is fixed at construction.
    Mutable state lives in attributes prefixed with an underscore; state()
    and restore() work on exactly those attributes, recursing into nested
    indicators.
    """

    # Names of the configuration attributes shown by __repr__
    PARAMS: tuple[str, ...] = ("period",)

    @abc.abstractmethod
    def update(self, value):
        """Feed one observation and return the indicator's current value(s)."""
        raise NotImplementedError

    @abc.abstractmethod
    def ready(self) -> bool:
        """Return True once the warm-up phase is over."""
        raise NotImplementedError

    @abc.abstractmethod
    def reset(self) -> None:
        """Reset indicator internal state to its initial (empty) condition."""
        raise NotImplementedError

    @abc.abstractmethod
    def warmup_periods(self) -> int:
        """Number of observations needed before ready() returns True."""
        raise NotImplementedError

    def state(self) -> dict[str, Any]:
        """
        Snapshot the mutable state as plain Python values.

        Rolling buffers become lists and nested indicators become nested
        dicts, so the snapshot can be handed to any serializer.
        """
        snapshot: dict[str, Any] = {}
        for key, value in vars(self).items():
            if not key.startswith("_"):
                continue
            if isinstance(value, Indicator):
                snapshot[key] = value.state()
            elif isinstance(value, deque):
                snapshot[key] = list(value)
            else:
                snapshot[key] = value
        return snapshot

    def restore(self, state: dict[str, Any]) -> None:
        """
        Load a snapshot taken with state() from an identically configured indicator.

        Raises:
            InvalidParameterError: if the snapshot does not fit this instance
        """
        expected = {key for key in vars(self) if key.startswith("_")}
        if set(state) != expected:
            raise InvalidParameterError(
                f"state keys {sorted(state)} do not match {self!r} ({sorted(expected)})"
            )

        for key, value in state.items():
            current = getattr(self, key)
            if isinstance(current, Indicator):
                current.restore(value)
            elif isinstance(current, deque):
                if current.maxlen is not None and len(value) > current.maxlen:
                    raise InvalidParameterError(
                        f"{key} holds {len(value)} values, {self!r} keeps at most {current.maxlen}"
                    )
                current.clear()
                current.extend(tuple(v) if isinstance(v, list) else v for v in value)
            else:
                setattr(self, key, value)

        log.debug("Restored %r", self)

    def __repr__(self) -> str:
        params = ", ".join(f"{name}={getattr(self, name)!r}" for name in self.PARAMS)
        return f"{self.__class__.__name__}({params})"
