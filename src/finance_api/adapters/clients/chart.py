# src/finance_api/adapters/clients/chart.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Chart façade: historical OHLCV bars.

Bounds are calendar :class:`Datetime` values resolved to unix seconds when
the request is built. A missing bound is sent as ``-1`` (unset). When both
bounds are given and the start falls after the end, the iterator carries a
:class:`ChartTimeError` and nothing is sent.

Usage:
    params = ChartParams(
        symbol="AAPL",
        start=Datetime(day=1, month=1, year=2024),
        end=Datetime(day=1, month=2, year=2024),
        interval=Interval.ONE_DAY,
    )
    it = chart.get(params)
    print(it.meta.currency)
    for bar in it:
        print(bar.timestamp, bar.close)
"""

from __future__ import annotations

from finance_api.adapters.normalizers import normalize_chart
from finance_api.application.form import encode
from finance_api.application.interfaces.backend import Backend
from finance_api.application.iter import Iter
from finance_api.application.query import Request, make_query
from finance_api.application.schemas.dto import ChartForm, ChartParams
from finance_api.application.schemas.dto.params import UNSET_TIME
from finance_api.dependencies.backends import SupportedBackend, get_backend
from finance_api.domain.entities import ChartBar, ChartMeta
from finance_api.domain.enums import Interval
from finance_api.domain.exceptions import ArgumentError, ChartTimeError
from finance_api.domain.value_objects import Datetime

CHART_PATH = "v8/finance/chart/{symbol}"

type ChartIter = Iter[ChartBar, ChartMeta]


class Client:
    """Chart requests against an explicit or registered backend."""

    def __init__(self, backend: Backend | None = None) -> None:
        self._backend = backend

    @property
    def backend(self) -> Backend:
        return self._backend or get_backend(SupportedBackend.YAHOO)

    def get(self, params: ChartParams | None) -> ChartIter:
        """Return an iterator over the bars described by ``params``."""
        if params is None or not params.symbol:
            return Iter.from_error(ArgumentError())

        start = params.start.to_unix() if params.start is not None else UNSET_TIME
        end = params.end.to_unix() if params.end is not None else UNSET_TIME
        if params.start is not None and params.end is not None and start > end:
            return Iter.from_error(ChartTimeError(details={"period1": start, "period2": end}))

        form = ChartForm(
            include_pre_post=params.include_ext,
            interval=params.interval,
            period1=start,
            period2=end,
        )
        request = Request.build(
            CHART_PATH.format(symbol=params.symbol), encode(form), params.context
        )
        return Iter(make_query(self.backend, request, normalize_chart))

    def get_historical_quote(
        self, symbol: str, month: int, day: int, year: int
    ) -> ChartBar | None:
        """Return the daily bar of ``symbol`` on one calendar date.

        Returns:
            ChartBar | None: The first bar, or ``None`` for a non-trading day.

        Raises:
            ArgumentError: The date is not a valid calendar date.
            FinanceError: The query failed.
        """
        try:
            when = Datetime(day=day, month=month, year=year)
        except ValueError as exc:
            raise ArgumentError(
                f"invalid date: {year:04d}-{month:02d}-{day:02d}",
                details={"year": year, "month": month, "day": day},
            ) from exc

        params = ChartParams(symbol=symbol, start=when, end=when, interval=Interval.ONE_DAY)
        it = self.get(params)
        if it.next():
            return it.current
        if it.err is not None:
            raise it.err
        return None


def get(params: ChartParams | None) -> ChartIter:
    """Return an iterator over the bars described by ``params``."""
    return Client().get(params)


def get_historical_quote(symbol: str, month: int, day: int, year: int) -> ChartBar | None:
    """Return the daily bar of ``symbol`` on ``year-month-day`` (or ``None``)."""
    return Client().get_historical_quote(symbol, month, day, year)


__all__ = ["CHART_PATH", "ChartIter", "Client", "get", "get_historical_quote"]
