# src/finance_api/adapters/clients/index.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Index façade: benchmark index levels.

Usage:
    idx = index.get("^GSPC")
    it = index.list(["^GSPC"])
    while it.next():
        print(it.current.symbol)
"""

from __future__ import annotations

from collections.abc import Sequence

from finance_api.adapters.clients._list import ListClient
from finance_api.application.iter import Iter
from finance_api.application.schemas.dto import ListParams
from finance_api.domain.entities import Index

type IndexIter = Iter[Index, None]


class Client(ListClient[Index]):
    """Index lookups against an explicit or registered backend."""

    model = Index


def get(symbol: str) -> Index | None:
    """Return the index record for ``symbol`` (raises the query error)."""
    return Client().get(symbol)


def list(symbols: Sequence[str] | str | None) -> IndexIter:
    """Return an iterator over index records for ``symbols``."""
    return Client().list(symbols)


def list_p(params: ListParams | None) -> IndexIter:
    """Return an iterator for a full params value."""
    return Client().list_p(params)


__all__ = ["Client", "IndexIter", "get", "list", "list_p"]
