# src/finance_api/adapters/clients/forex.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Forex façade: currency pair quotes.

Usage:
    pair = forex.get("EURUSD=X")
    it = forex.list(["EURUSD=X"])
    while it.next():
        print(it.current.symbol)
"""

from __future__ import annotations

from collections.abc import Sequence

from finance_api.adapters.clients._list import ListClient
from finance_api.application.iter import Iter
from finance_api.application.schemas.dto import ListParams
from finance_api.domain.entities import ForexPair

type ForexPairIter = Iter[ForexPair, None]


class Client(ListClient[ForexPair]):
    """ForexPair lookups against an explicit or registered backend."""

    model = ForexPair


def get(symbol: str) -> ForexPair | None:
    """Return the currency pair record for ``symbol`` (raises the query error)."""
    return Client().get(symbol)


def list(symbols: Sequence[str] | str | None) -> ForexPairIter:
    """Return an iterator over currency pair records for ``symbols``."""
    return Client().list(symbols)


def list_p(params: ListParams | None) -> ForexPairIter:
    """Return an iterator for a full params value."""
    return Client().list_p(params)


__all__ = ["Client", "ForexPairIter", "get", "list", "list_p"]
