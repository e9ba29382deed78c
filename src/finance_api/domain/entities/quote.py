# src/finance_api/domain/entities/quote.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Quote Entities.

Purpose:
    Provider quote records returned by the ``v7/finance/quote`` endpoint. The
    common fields live on :class:`Quote`; each instrument family adds the
    fields only it carries.

Layer: domain/entities
"""

from __future__ import annotations

from pydantic import Field

from finance_api.domain.entities.base import ProviderModel
from finance_api.domain.enums.market import MarketState, QuoteType


class Quote(ProviderModel):
    """Common quote fields shared by every instrument family."""

    symbol: str = ""
    quote_type: QuoteType | str | None = None
    market_state: MarketState | str | None = None
    short_name: str | None = None
    long_name: str | None = None
    currency: str | None = None
    exchange: str | None = None
    full_exchange_name: str | None = None
    exchange_timezone_name: str | None = None
    exchange_timezone_short_name: str | None = None
    gmt_off_set_milliseconds: int | None = None
    exchange_data_delayed_by: int | None = None
    source_interval: int | None = None
    quote_source_name: str | None = None
    is_tradeable: bool | None = Field(default=None, alias="tradeable")

    regular_market_price: float | None = None
    regular_market_change: float | None = None
    regular_market_change_percent: float | None = None
    regular_market_time: int | None = None
    regular_market_open: float | None = None
    regular_market_day_high: float | None = None
    regular_market_day_low: float | None = None
    regular_market_volume: int | None = None
    regular_market_previous_close: float | None = None

    pre_market_price: float | None = None
    pre_market_change: float | None = None
    pre_market_change_percent: float | None = None
    pre_market_time: int | None = None

    post_market_price: float | None = None
    post_market_change: float | None = None
    post_market_change_percent: float | None = None
    post_market_time: int | None = None

    bid: float | None = None
    ask: float | None = None
    bid_size: int | None = None
    ask_size: int | None = None

    fifty_two_week_low: float | None = None
    fifty_two_week_high: float | None = None
    fifty_day_average: float | None = None
    two_hundred_day_average: float | None = None
    average_daily_volume_3_month: int | None = Field(
        default=None, alias="averageDailyVolume3Month"
    )
    average_daily_volume_10_day: int | None = Field(
        default=None, alias="averageDailyVolume10Day"
    )


class Equity(Quote):
    """Equity quote with valuation and dividend fields."""

    dividend_date: int | None = None
    trailing_annual_dividend_rate: float | None = None
    trailing_annual_dividend_yield: float | None = None
    eps_trailing_twelve_months: float | None = None
    eps_forward: float | None = None
    shares_outstanding: int | None = None
    book_value: float | None = None
    market_cap: int | None = None
    price_to_book: float | None = None
    forward_pe: float | None = Field(default=None, alias="forwardPE")
    trailing_pe: float | None = Field(default=None, alias="trailingPE")
    earnings_timestamp: int | None = None
    earnings_timestamp_start: int | None = None
    earnings_timestamp_end: int | None = None


class ETF(Quote):
    """Exchange traded fund quote."""

    yield_: float | None = Field(default=None, alias="yield")
    ytd_return: float | None = None
    trailing_three_month_returns: float | None = None
    trailing_three_month_nav_returns: float | None = None
    net_assets: float | None = None


class MutualFund(Quote):
    """Mutual fund quote."""

    yield_: float | None = Field(default=None, alias="yield")
    ytd_return: float | None = None
    trailing_three_month_returns: float | None = None
    trailing_three_month_nav_returns: float | None = None


class ForexPair(Quote):
    """Currency pair quote."""


class Index(Quote):
    """Market index quote."""


class Future(Quote):
    """Futures contract quote."""

    underlying_symbol: str | None = None
    open_interest: int | None = None
    expire_date: int | None = None


class CryptoPair(Quote):
    """Crypto currency pair quote."""

    algorithm: str | None = None
    start_date: int | None = None
    max_supply: float | None = None
    circulating_supply: float | None = None
    volume_24_hr: float | None = Field(default=None, alias="volume24Hr")
    volume_all_currencies: float | None = None


__all__ = [
    "CryptoPair",
    "ETF",
    "Equity",
    "ForexPair",
    "Future",
    "Index",
    "MutualFund",
    "Quote",
]
