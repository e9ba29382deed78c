# src/finance_api/application/iter.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Result Iterator.

Synopsis:
    :class:`Iter` wraps a query function, executes it exactly once at
    construction, and then offers forward-only, single-pass traversal of the
    buffered items together with the query's metadata and terminal error.

Design:
    * Eager: construction performs the network round trip, so argument and
      transport failures are visible through :attr:`Iter.err` and metadata
      through :attr:`Iter.meta` before the first advance.
    * Errors are values. A failed query never raises out of the iterator; the
      caller inspects :attr:`Iter.err` once :meth:`Iter.next` returns False.
    * Single page. Every current endpoint answers in one response. A "fetch
      more" hook would slot in where :meth:`Iter.next` finds the buffer empty;
      it is an extension point only and is not implemented.
    * Not thread-safe; one logical owner advances an iterator.

Usage:
    it = quote.list(["AAPL", "MSFT"])
    while it.next():
        print(it.current.symbol)
    if it.err is not None:
        raise it.err

Layer:
    application
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator, Sequence
from typing import Any, NamedTuple

from finance_api.domain.exceptions import FinanceError

__all__ = ["Iter", "NoCurrentValueError", "Query", "QueryResult"]


class NoCurrentValueError(LookupError):
    """Raised when :attr:`Iter.current` is read without a successful advance."""


class QueryResult[T, M](NamedTuple):
    """Normalized output of one query: metadata, ordered items and error."""

    meta: M | None
    items: Sequence[T]
    error: FinanceError | None


type Query[T, M] = Callable[[], QueryResult[T, M]]


class Iter[T, M]:
    """Forward-only iterator over one query's items.

    Args:
        query: Zero-argument callable performing one round trip.
    """

    __slots__ = ("_current", "_err", "_has_current", "_items", "_meta")

    def __init__(self, query: Query[T, M]) -> None:
        meta, items, error = query()
        self._meta: M | None = meta
        self._items: deque[T] = deque(items or ())
        self._err: FinanceError | None = error
        self._current: Any = None
        self._has_current = False

    @classmethod
    def from_error(cls, err: FinanceError) -> Iter[T, M]:
        """Build an iterator that failed before reaching the network."""
        return cls(lambda: QueryResult(None, (), err))

    def next(self) -> bool:
        """Advance to the next item.

        Returns:
            bool: True when :attr:`current` now holds a new item. False when a
            terminal error is set or the items are exhausted.
        """
        if self._err is not None or not self._items:
            self._has_current = False
            return False
        self._current = self._items.popleft()
        self._has_current = True
        return True

    @property
    def current(self) -> T:
        """The item produced by the last successful :meth:`next`.

        Raises:
            NoCurrentValueError: Before any advance, or after an advance that
                returned False.
        """
        if not self._has_current:
            raise NoCurrentValueError("no current value: call next() and check its result")
        return self._current

    @property
    def err(self) -> FinanceError | None:
        """The terminal error, or ``None`` for a successful query."""
        return self._err

    @property
    def meta(self) -> M | None:
        """Side-channel metadata (available before any advance)."""
        return self._meta

    def count(self) -> int:
        """Number of items not yet consumed."""
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not self.next():
            raise StopIteration
        return self._current

    def __repr__(self) -> str:
        return f"Iter(remaining={len(self._items)}, err={self._err!r})"
