# src/finance_api/application/query.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Request descriptors and query functions.

A :class:`Request` is the immutable, fully-derived description of one upstream
call (path, encoded query pairs, deadline handle). :func:`make_query` binds a
request to a backend and an envelope normalizer, producing the zero-argument
query function that :class:`~finance_api.application.iter.Iter` executes.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from finance_api.application.form import Values
from finance_api.application.interfaces.backend import Backend
from finance_api.application.iter import Query, QueryResult
from finance_api.domain.exceptions import FinanceError
from finance_api.domain.value_objects import RequestContext
from finance_api.infrastructure.logging.logger import get_json_logger

__all__ = ["Normalizer", "Request", "make_query"]

logger = get_json_logger(__name__)

type Normalizer[T, M] = Callable[[bytes], QueryResult[T, M]]


@dataclass(frozen=True, slots=True)
class Request:
    """One upstream call, fully derived from caller params.

    Attributes:
        path: Endpoint path relative to the provider host.
        params: Ordered query-string pairs.
        context: Optional timeout/deadline handle.
    """

    path: str
    params: tuple[tuple[str, str], ...] = ()
    context: RequestContext | None = None

    @classmethod
    def build(cls, path: str, values: Values, context: RequestContext | None = None) -> Request:
        """Freeze encoded :class:`Values` into a request."""
        return cls(path=path, params=tuple(values.to_list()), context=context)


def make_query[T, M](
    backend: Backend,
    request: Request,
    normalizer: Normalizer[T, M],
) -> Query[T, M]:
    """Bind ``request`` to ``backend`` and ``normalizer``.

    Invoking the returned callable performs exactly one round trip. Every
    :class:`FinanceError` is captured into the result instead of raised.

    Args:
        backend: Transport executing the call.
        request: Immutable request descriptor.
        normalizer: Envelope normalizer for the endpoint family.

    Returns:
        Query: Zero-argument query function.
    """

    def _query() -> QueryResult[T, M]:
        try:
            body = backend.call(request.path, request.params, request.context)
            return normalizer(body)
        except FinanceError as exc:
            logger.error(
                "finance.query.failed",
                extra={"extra": {"path": request.path, "kind": exc.kind, "error": str(exc)}},
            )
            return QueryResult(None, (), exc)

    return _query
