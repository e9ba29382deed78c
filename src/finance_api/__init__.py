# src/finance_api/__init__.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""finance_api: market-data quotes, charts and option chains.

Every query returns an :class:`Iter` that has already performed its single
upstream round trip. Advance it with :meth:`Iter.next` (or a ``for`` loop)
and inspect :attr:`Iter.err` afterwards.

Example:
    from finance_api import quote

    q = quote.get("AAPL")
    it = quote.list(["AAPL", "MSFT"])
    for item in it:
        print(item.symbol, item.regular_market_price)
    if it.err is not None:
        raise it.err
"""

from __future__ import annotations

from finance_api.adapters.clients import (
    chart,
    crypto,
    equity,
    etf,
    forex,
    future,
    index,
    mutualfund,
    options,
    quote,
)
from finance_api.application.iter import Iter, NoCurrentValueError, QueryResult
from finance_api.application.schemas.dto import ChartParams, ListParams, OptionsParams
from finance_api.config import FinanceSettings, get_settings
from finance_api.dependencies.backends import (
    Backends,
    SupportedBackend,
    get_backend,
    new_backends,
    set_backend,
    set_http_client,
)
from finance_api.domain.entities import (
    ETF,
    ChartBar,
    ChartMeta,
    CryptoPair,
    Equity,
    ForexPair,
    Future,
    Index,
    MutualFund,
    OptionContract,
    OptionsMeta,
    Quote,
    Straddle,
)
from finance_api.domain.enums import Interval, MarketState, QuoteType
from finance_api.domain.exceptions import (
    ArgumentError,
    ChartTimeError,
    FinanceError,
    RemoteError,
    TransportError,
)
from finance_api.domain.value_objects import Datetime, RequestContext
from finance_api.infrastructure.external_apis.yahoo.client import (
    BackendConfiguration,
    YahooBackend,
)
from finance_api.infrastructure.logging import (
    LogLevel,
    configure_library_logging,
    get_log_level,
    set_log_level,
    set_logger,
)

configure_library_logging()

__version__ = "0.1.0"

__all__ = [
    "ETF",
    "ArgumentError",
    "BackendConfiguration",
    "Backends",
    "ChartBar",
    "ChartMeta",
    "ChartParams",
    "ChartTimeError",
    "CryptoPair",
    "Datetime",
    "Equity",
    "FinanceError",
    "FinanceSettings",
    "ForexPair",
    "Future",
    "Index",
    "Interval",
    "Iter",
    "ListParams",
    "LogLevel",
    "MarketState",
    "MutualFund",
    "NoCurrentValueError",
    "OptionContract",
    "OptionsMeta",
    "OptionsParams",
    "Quote",
    "QueryResult",
    "QuoteType",
    "RemoteError",
    "RequestContext",
    "Straddle",
    "SupportedBackend",
    "TransportError",
    "YahooBackend",
    "chart",
    "crypto",
    "equity",
    "etf",
    "forex",
    "future",
    "get_backend",
    "get_log_level",
    "get_settings",
    "index",
    "mutualfund",
    "new_backends",
    "options",
    "quote",
    "set_backend",
    "set_http_client",
    "set_log_level",
    "set_logger",
]
