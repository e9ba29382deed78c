"""Domain entity exports."""

from __future__ import annotations

from .chart import ChartBar, ChartMeta, CurrentTradingPeriod, TradingPeriod
from .options import OptionContract, OptionsMeta, Straddle
from .quote import ETF, CryptoPair, Equity, ForexPair, Future, Index, MutualFund, Quote

__all__ = [
    "ETF",
    "ChartBar",
    "ChartMeta",
    "CryptoPair",
    "CurrentTradingPeriod",
    "Equity",
    "ForexPair",
    "Future",
    "Index",
    "MutualFund",
    "OptionContract",
    "OptionsMeta",
    "Quote",
    "Straddle",
    "TradingPeriod",
]
