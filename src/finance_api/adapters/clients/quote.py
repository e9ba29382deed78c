# src/finance_api/adapters/clients/quote.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Quote façade: common quote fields for any instrument.

Usage:
    q = quote.get("AAPL")
    it = quote.list(["AAPL"])
    while it.next():
        print(it.current.symbol)
"""

from __future__ import annotations

from collections.abc import Sequence

from finance_api.adapters.clients._list import ListClient
from finance_api.application.iter import Iter
from finance_api.application.schemas.dto import ListParams
from finance_api.domain.entities import Quote

type QuoteIter = Iter[Quote, None]


class Client(ListClient[Quote]):
    """Quote lookups against an explicit or registered backend."""

    model = Quote


def get(symbol: str) -> Quote | None:
    """Return the quote record for ``symbol`` (raises the query error)."""
    return Client().get(symbol)


def list(symbols: Sequence[str] | str | None) -> QuoteIter:
    """Return an iterator over quote records for ``symbols``."""
    return Client().list(symbols)


def list_p(params: ListParams | None) -> QuoteIter:
    """Return an iterator for a full params value."""
    return Client().list_p(params)


__all__ = ["Client", "QuoteIter", "get", "list", "list_p"]
