# src/finance_api/adapters/clients/future.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Futures façade: contract quotes with open interest and expiry.

Usage:
    fut = future.get("CL=F")
    it = future.list(["CL=F"])
    while it.next():
        print(it.current.symbol)
"""

from __future__ import annotations

from collections.abc import Sequence

from finance_api.adapters.clients._list import ListClient
from finance_api.application.iter import Iter
from finance_api.application.schemas.dto import ListParams
from finance_api.domain.entities import Future

type FutureIter = Iter[Future, None]


class Client(ListClient[Future]):
    """Future lookups against an explicit or registered backend."""

    model = Future


def get(symbol: str) -> Future | None:
    """Return the future record for ``symbol`` (raises the query error)."""
    return Client().get(symbol)


def list(symbols: Sequence[str] | str | None) -> FutureIter:
    """Return an iterator over future records for ``symbols``."""
    return Client().list(symbols)


def list_p(params: ListParams | None) -> FutureIter:
    """Return an iterator for a full params value."""
    return Client().list_p(params)


__all__ = ["Client", "FutureIter", "get", "list", "list_p"]
