# src/finance_api/adapters/clients/mutualfund.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Mutual fund façade: fund quotes with NAV and trailing returns.

Usage:
    fund = mutualfund.get("FMAGX")
    it = mutualfund.list(["FMAGX"])
    while it.next():
        print(it.current.symbol)
"""

from __future__ import annotations

from collections.abc import Sequence

from finance_api.adapters.clients._list import ListClient
from finance_api.application.iter import Iter
from finance_api.application.schemas.dto import ListParams
from finance_api.domain.entities import MutualFund

type MutualFundIter = Iter[MutualFund, None]


class Client(ListClient[MutualFund]):
    """MutualFund lookups against an explicit or registered backend."""

    model = MutualFund


def get(symbol: str) -> MutualFund | None:
    """Return the mutual fund record for ``symbol`` (raises the query error)."""
    return Client().get(symbol)


def list(symbols: Sequence[str] | str | None) -> MutualFundIter:
    """Return an iterator over mutual fund records for ``symbols``."""
    return Client().list(symbols)


def list_p(params: ListParams | None) -> MutualFundIter:
    """Return an iterator for a full params value."""
    return Client().list_p(params)


__all__ = ["Client", "MutualFundIter", "get", "list", "list_p"]
