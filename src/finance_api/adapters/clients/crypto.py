# src/finance_api/adapters/clients/crypto.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Crypto façade: cryptocurrency pair quotes.

Usage:
    pair = crypto.get("BTC-USD")
    it = crypto.list(["BTC-USD"])
    while it.next():
        print(it.current.symbol)
"""

from __future__ import annotations

from collections.abc import Sequence

from finance_api.adapters.clients._list import ListClient
from finance_api.application.iter import Iter
from finance_api.application.schemas.dto import ListParams
from finance_api.domain.entities import CryptoPair

type CryptoPairIter = Iter[CryptoPair, None]


class Client(ListClient[CryptoPair]):
    """CryptoPair lookups against an explicit or registered backend."""

    model = CryptoPair


def get(symbol: str) -> CryptoPair | None:
    """Return the crypto pair record for ``symbol`` (raises the query error)."""
    return Client().get(symbol)


def list(symbols: Sequence[str] | str | None) -> CryptoPairIter:
    """Return an iterator over crypto pair records for ``symbols``."""
    return Client().list(symbols)


def list_p(params: ListParams | None) -> CryptoPairIter:
    """Return an iterator for a full params value."""
    return Client().list_p(params)


__all__ = ["Client", "CryptoPairIter", "get", "list", "list_p"]
