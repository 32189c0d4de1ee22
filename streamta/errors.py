# streamta/errors.py
"""Exceptions raised by streamta."""


class StreamTAError(Exception):
    """Base class for all streamta errors."""


class InvalidParameterError(StreamTAError, ValueError):
    """An indicator was constructed with an invalid period, multiplier or ordering."""


class InvalidQuoteError(StreamTAError, ValueError):
    """A quote record failed validation."""


class ConfigError(StreamTAError):
    """Settings or an indicator parameter file could not be used."""
