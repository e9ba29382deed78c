# src/finance_api/adapters/clients/etf.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""ETF façade: exchange-traded fund quotes.

Usage:
    fund = etf.get("SPY")
    it = etf.list(["SPY"])
    while it.next():
        print(it.current.symbol)
"""

from __future__ import annotations

from collections.abc import Sequence

from finance_api.adapters.clients._list import ListClient
from finance_api.application.iter import Iter
from finance_api.application.schemas.dto import ListParams
from finance_api.domain.entities import ETF

type ETFIter = Iter[ETF, None]


class Client(ListClient[ETF]):
    """ETF lookups against an explicit or registered backend."""

    model = ETF


def get(symbol: str) -> ETF | None:
    """Return the ETF record for ``symbol`` (raises the query error)."""
    return Client().get(symbol)


def list(symbols: Sequence[str] | str | None) -> ETFIter:
    """Return an iterator over ETF records for ``symbols``."""
    return Client().list(symbols)


def list_p(params: ListParams | None) -> ETFIter:
    """Return an iterator for a full params value."""
    return Client().list_p(params)


__all__ = ["Client", "ETFIter", "get", "list", "list_p"]
