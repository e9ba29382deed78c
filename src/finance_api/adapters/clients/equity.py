# src/finance_api/adapters/clients/equity.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Equity façade: stock quotes with valuation and dividend fields.

Usage:
    eq = equity.get("AAPL")
    it = equity.list(["AAPL"])
    while it.next():
        print(it.current.symbol)
"""

from __future__ import annotations

from collections.abc import Sequence

from finance_api.adapters.clients._list import ListClient
from finance_api.application.iter import Iter
from finance_api.application.schemas.dto import ListParams
from finance_api.domain.entities import Equity

type EquityIter = Iter[Equity, None]


class Client(ListClient[Equity]):
    """Equity lookups against an explicit or registered backend."""

    model = Equity


def get(symbol: str) -> Equity | None:
    """Return the equity record for ``symbol`` (raises the query error)."""
    return Client().get(symbol)


def list(symbols: Sequence[str] | str | None) -> EquityIter:
    """Return an iterator over equity records for ``symbols``."""
    return Client().list(symbols)


def list_p(params: ListParams | None) -> EquityIter:
    """Return an iterator for a full params value."""
    return Client().list_p(params)


__all__ = ["Client", "EquityIter", "get", "list", "list_p"]
