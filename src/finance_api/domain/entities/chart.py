# src/finance_api/domain/entities/chart.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Chart Entities.

Synopsis:
    Historical OHLCV bars and the chart metadata returned alongside them by the
    ``v8/finance/chart/{symbol}`` endpoint.

Layer:
    domain/entities
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from finance_api.domain.entities.base import BaseEntity, ProviderModel


@dataclass(frozen=True)
class ChartBar(BaseEntity):
    """A single OHLCV bar.

    Attributes:
        timestamp: Bar open time as unix seconds.
        open: Open price for the interval.
        high: High price for the interval.
        low: Low price for the interval.
        close: Close price for the interval.
        volume: Traded volume for the interval.
        adj_close: Split/dividend adjusted close; zero when the provider omits it.
    """

    timestamp: int
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: int
    adj_close: Decimal = field(default_factory=Decimal)

    def __post_init__(self) -> None:
        """Enforce core invariants for chart bars."""
        super().__post_init__()
        if self.volume < 0:
            raise ValueError("ChartBar.volume must be >= 0.")


class TradingPeriod(ProviderModel):
    """One trading session window."""

    timezone: str | None = None
    start: int | None = None
    end: int | None = None
    gmtoffset: int | None = None


class CurrentTradingPeriod(ProviderModel):
    """Pre, regular and post session windows for the current day."""

    pre: TradingPeriod | None = None
    regular: TradingPeriod | None = None
    post: TradingPeriod | None = None


class ChartMeta(ProviderModel):
    """Chart calendar and instrument metadata."""

    currency: str | None = None
    symbol: str = ""
    exchange_name: str | None = None
    instrument_type: str | None = None
    first_trade_date: int | None = None
    regular_market_time: int | None = None
    gmtoffset: int | None = None
    timezone: str | None = None
    exchange_timezone_name: str | None = None
    regular_market_price: float | None = None
    chart_previous_close: float | None = None
    previous_close: float | None = None
    scale: int | None = None
    price_hint: int | None = None
    current_trading_period: CurrentTradingPeriod | None = None
    trading_periods: Any = None
    data_granularity: str | None = None
    range: str | None = None
    valid_ranges: list[str] = []


__all__ = ["ChartBar", "ChartMeta", "CurrentTradingPeriod", "TradingPeriod"]
