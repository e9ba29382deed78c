# src/finance_api/domain/enums/market.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Market Enumerations.

Synopsis:
    String enumerations for bar aggregation intervals, trading session states
    and quote instrument types as reported by the provider.

Layer:
    domain/enums
"""

from __future__ import annotations

from enum import Enum


class Interval(str, Enum):
    """Aggregation interval of a chart bar (provider ``interval`` codes)."""

    ONE_MIN = "1m"
    TWO_MINS = "2m"
    FIVE_MINS = "5m"
    FIFTEEN_MINS = "15m"
    THIRTY_MINS = "30m"
    SIXTY_MINS = "60m"
    NINETY_MINS = "90m"
    ONE_HOUR = "1h"
    ONE_DAY = "1d"
    FIVE_DAY = "5d"
    ONE_MONTH = "1mo"
    THREE_MONTH = "3mo"
    SIX_MONTH = "6mo"
    ONE_YEAR = "1y"
    TWO_YEAR = "2y"
    FIVE_YEAR = "5y"
    TEN_YEAR = "10y"
    YTD = "ytd"
    MAX = "max"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return the provider code for this interval."""
        return self.value


class MarketState(str, Enum):
    """Trading session state attached to a quote."""

    PRE = "PRE"
    PREPRE = "PREPRE"
    REGULAR = "REGULAR"
    POST = "POST"
    POSTPOST = "POSTPOST"
    CLOSED = "CLOSED"


class QuoteType(str, Enum):
    """Instrument type of a quote."""

    EQUITY = "EQUITY"
    ETF = "ETF"
    MUTUALFUND = "MUTUALFUND"
    INDEX = "INDEX"
    CURRENCY = "CURRENCY"
    FUTURE = "FUTURE"
    CRYPTOCURRENCY = "CRYPTOCURRENCY"
    OPTION = "OPTION"
