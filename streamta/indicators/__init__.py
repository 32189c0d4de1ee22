# streamta/indicators/__init__.py
"""
Streaming technical indicators.

Every indicator is a stateful object fed one observation at a time. update()
returns the current value straight away (computed over the observations seen
so far during warm-up), ready() tells when the warm-up is over, and reset()
returns the indicator to its freshly constructed state.

Example:
    from streamta import Quote
    from streamta.indicators import RelativeStrengthIndex, BollingerBands, MACD

    rsi = RelativeStrengthIndex(period=14)
    bands = BollingerBands(period=20, multiplier=2.0)
    macd = MACD(fast=12, slow=26, signal=9)

    # Update with each new quote (or a plain closing price)
    rsi_value = rsi.update(quote)
    band_values = bands.update(quote.close)
    macd_values = macd.update(quote)
"""

from .base import Indicator, check_period, check_positive
from .extrema import Maximum, Minimum
from .sma import MeanAbsoluteDeviation, SimpleMovingAverage, StandardDeviation
from .wma import HullMovingAverage, WeightedMovingAverage
from .ema import ExponentialMovingAverage, WilderMovingAverage
from .atr import AverageTrueRange, TrueRange
from .bands import (
    BollingerBands,
    BollingerBandsOutput,
    ChandelierExit,
    ChandelierExitOutput,
    KeltnerChannel,
    KeltnerChannelOutput,
)
from .macd import MACD, MACDOutput, PercentagePriceOscillator, PPOOutput
from .rsi import RelativeStrengthIndex
from .stochastic import FastStochastic, SlowStochastic, StochasticOutput, WilliamsR
from .cci import CommodityChannelIndex
from .volume import MoneyFlowIndex, OnBalanceVolume, VolumeWeightedAveragePrice
from .momentum import EfficiencyRatio, RateOfChange
from .adx import ADXOutput, AverageDirectionalIndex
from .qqe import QQEOutput, QuantitativeQualitativeEstimation

# Short aliases
SMA = SimpleMovingAverage
EMA = ExponentialMovingAverage
WMA = WeightedMovingAverage
HMA = HullMovingAverage
ATR = AverageTrueRange
PPO = PercentagePriceOscillator
RSI = RelativeStrengthIndex
CCI = CommodityChannelIndex
MFI = MoneyFlowIndex
OBV = OnBalanceVolume
VWAP = VolumeWeightedAveragePrice
ROC = RateOfChange
ADX = AverageDirectionalIndex
QQE = QuantitativeQualitativeEstimation

__all__ = [
    "Indicator",
    "check_period",
    "check_positive",
    "Minimum",
    "Maximum",
    "SimpleMovingAverage",
    "StandardDeviation",
    "MeanAbsoluteDeviation",
    "WeightedMovingAverage",
    "HullMovingAverage",
    "ExponentialMovingAverage",
    "WilderMovingAverage",
    "TrueRange",
    "AverageTrueRange",
    "BollingerBands",
    "BollingerBandsOutput",
    "KeltnerChannel",
    "KeltnerChannelOutput",
    "ChandelierExit",
    "ChandelierExitOutput",
    "MACD",
    "MACDOutput",
    "PercentagePriceOscillator",
    "PPOOutput",
    "RelativeStrengthIndex",
    "FastStochastic",
    "SlowStochastic",
    "StochasticOutput",
    "WilliamsR",
    "CommodityChannelIndex",
    "MoneyFlowIndex",
    "OnBalanceVolume",
    "VolumeWeightedAveragePrice",
    "RateOfChange",
    "EfficiencyRatio",
    "AverageDirectionalIndex",
    "ADXOutput",
    "QuantitativeQualitativeEstimation",
    "QQEOutput",
    "SMA",
    "EMA",
    "WMA",
    "HMA",
    "ATR",
    "PPO",
    "RSI",
    "CCI",
    "MFI",
    "OBV",
    "VWAP",
    "ROC",
    "ADX",
    "QQE",
]
