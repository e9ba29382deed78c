# src/finance_api/infrastructure/external_apis/yahoo/types.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""
Yahoo Finance Types.

Purpose:
    Provide typed response fragments for the endpoints this library consumes
    (quote list, chart, options chain).

Layer:
    infrastructure

Notes:
    These are intentionally partial; only keys read by the normalizers are
    typed. Every key may be absent or ``null`` on the wire.
"""

from __future__ import annotations

from typing import Any, TypedDict


class YahooErrorPayload(TypedDict, total=False):
    """Envelope-level error object."""

    code: str
    description: str


class QuoteResponseInner(TypedDict, total=False):
    """``quoteResponse`` member of a quote-list envelope."""

    result: list[dict[str, Any]] | None
    error: YahooErrorPayload | None


class QuoteEnvelope(TypedDict, total=False):
    """Root of ``v7/finance/quote``."""

    quoteResponse: QuoteResponseInner | None


class ChartQuoteBlock(TypedDict, total=False):
    """Parallel OHLCV arrays."""

    open: list[float | None] | None
    high: list[float | None] | None
    low: list[float | None] | None
    close: list[float | None] | None
    volume: list[int | None] | None


class ChartAdjCloseBlock(TypedDict, total=False):
    """Parallel adjusted-close array."""

    adjclose: list[float | None] | None


class ChartIndicators(TypedDict, total=False):
    """Indicator blocks keyed by family."""

    quote: list[ChartQuoteBlock | None] | None
    adjclose: list[ChartAdjCloseBlock | None] | None


class ChartResult(TypedDict, total=False):
    """One element of ``chart.result``."""

    meta: dict[str, Any] | None
    timestamp: list[int] | None
    indicators: ChartIndicators | None


class ChartResponseInner(TypedDict, total=False):
    """``chart`` member of a chart envelope."""

    result: list[ChartResult | None] | None
    error: YahooErrorPayload | None


class ChartEnvelope(TypedDict, total=False):
    """Root of ``v8/finance/chart/{symbol}``."""

    chart: ChartResponseInner | None


class OptionsBlock(TypedDict, total=False):
    """One per-expiration block inside ``options``."""

    expirationDate: int
    hasMiniOptions: bool
    straddles: list[dict[str, Any]] | None
    calls: list[dict[str, Any]] | None
    puts: list[dict[str, Any]] | None


class OptionResult(TypedDict, total=False):
    """One element of ``optionChain.result``."""

    underlyingSymbol: str
    expirationDates: list[int] | None
    strikes: list[float] | None
    hasMiniOptions: bool
    quote: dict[str, Any] | None
    options: list[OptionsBlock] | None


class OptionChainInner(TypedDict, total=False):
    """``optionChain`` member of an options envelope."""

    result: list[OptionResult | None] | None
    error: YahooErrorPayload | None


class OptionsEnvelope(TypedDict, total=False):
    """Root of ``v7/finance/options/{symbol}``."""

    optionChain: OptionChainInner | None
