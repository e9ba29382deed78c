# src/finance_api/adapters/clients/_list.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Shared façade for the quote-list family.

Quote, equity, etf, forex, future, index, mutual fund and crypto lookups all
hit ``v7/finance/quote`` with a comma-joined ``symbols`` parameter and differ
only in the record model they decode into. :class:`ListClient` implements the
three access forms once; each domain module binds its model.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import ClassVar

from finance_api.adapters.normalizers import normalize_list
from finance_api.application.form import encode
from finance_api.application.interfaces.backend import Backend
from finance_api.application.iter import Iter
from finance_api.application.query import Request, make_query
from finance_api.application.schemas.dto import ListParams, QuoteForm
from finance_api.dependencies.backends import SupportedBackend, get_backend
from finance_api.domain.entities import Quote
from finance_api.domain.exceptions import ArgumentError

QUOTE_PATH = "v7/finance/quote"


class ListClient[QuoteT: Quote]:
    """Quote-list façade bound to one record model.

    Args:
        backend: Explicit transport. When omitted, the registered Yahoo
            backend is resolved at call time.
    """

    model: ClassVar[type[Quote]] = Quote

    def __init__(self, backend: Backend | None = None) -> None:
        self._backend = backend

    @property
    def backend(self) -> Backend:
        return self._backend or get_backend(SupportedBackend.YAHOO)

    def get(self, symbol: str) -> QuoteT | None:
        """Return the record for ``symbol``.

        Returns:
            The first record, or ``None`` when the provider returned none.

        Raises:
            FinanceError: The query failed.
        """
        it = self.list([symbol])
        if it.next():
            return it.current
        if it.err is not None:
            raise it.err
        return None

    def list(self, symbols: Sequence[str] | str | None) -> Iter[QuoteT, None]:
        """Return an iterator over the records for ``symbols``.

        A bare string is one symbol, not a sequence of characters. ``None``
        behaves like an empty list.
        """
        if symbols is None:
            return self.list_p(None)
        if isinstance(symbols, str):
            symbols = (symbols,)
        return self.list_p(ListParams(symbols=tuple(symbols)))

    def list_p(self, params: ListParams | None) -> Iter[QuoteT, None]:
        """Return an iterator for a full :class:`ListParams` value.

        An absent or empty symbol list yields an iterator carrying an
        :class:`ArgumentError`; no request is made.
        """
        if params is None or not params.has_symbols:
            return Iter.from_error(ArgumentError())

        form = QuoteForm(symbols=params.symbols)
        request = Request.build(QUOTE_PATH, encode(form), params.context)
        normalizer = normalize_list(self.model)
        return Iter(make_query(self.backend, request, normalizer))  # type: ignore[arg-type]
