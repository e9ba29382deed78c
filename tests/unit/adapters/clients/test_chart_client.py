# tests/unit/adapters/clients/test_chart_client.py
from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from typing import Any

import pytest

from finance_api.adapters.clients import chart
from finance_api.application.schemas.dto import ChartParams
from finance_api.dependencies.backends import SupportedBackend, set_backend
from finance_api.domain.entities import ChartBar
from finance_api.domain.enums import Interval
from finance_api.domain.exceptions import ArgumentError, ChartTimeError, RemoteError
from finance_api.domain.value_objects import Datetime

CHART: dict[str, Any] = {
    "chart": {
        "result": [
            {
                "meta": {"currency": "USD", "symbol": "AAPL"},
                "timestamp": [1704205800, 1704292200],
                "indicators": {
                    "quote": [
                        {
                            "open": [187.15, 184.22],
                            "high": [188.44, 185.88],
                            "low": [183.89, 183.43],
                            "close": [185.64, 184.25],
                            "volume": [82488700, 58414500],
                        }
                    ],
                    "adjclose": [{"adjclose": [185.15, 183.76]}],
                },
            }
        ],
        "error": None,
    }
}

NO_BARS: dict[str, Any] = {
    "chart": {
        "result": [{"meta": {"symbol": "AAPL"}, "indicators": {"quote": [{}]}}],
        "error": None,
    }
}

JAN_1 = Datetime(day=1, month=1, year=2024)
FEB_1 = Datetime(day=1, month=2, year=2024)


def test_get_yields_bars_with_meta_before_first_advance(
    make_backend: Callable[..., Any],
) -> None:
    backend = make_backend(CHART)
    params = ChartParams(symbol="AAPL", start=JAN_1, end=FEB_1, interval=Interval.ONE_DAY)

    it = chart.Client(backend).get(params)

    assert it.meta is not None
    assert it.meta.currency == "USD"
    bars = list(it)
    assert [b.timestamp for b in bars] == [1704205800, 1704292200]
    assert bars[0].close == Decimal("185.64")
    assert bars[1].adj_close == Decimal("183.76")


def test_get_builds_the_chart_query(make_backend: Callable[..., Any]) -> None:
    backend = make_backend(CHART)
    params = ChartParams(symbol="AAPL", start=JAN_1, end=FEB_1, interval=Interval.ONE_DAY)

    chart.Client(backend).get(params)

    assert backend.last_path == "v8/finance/chart/AAPL"
    assert backend.last_params == {
        "interval": "1d",
        "period1": str(JAN_1.to_unix()),
        "period2": str(FEB_1.to_unix()),
        "region": "US",
        "corsDomain": "com.finance.yahoo",
    }


def test_extended_hours_flag_is_sent_when_requested(make_backend: Callable[..., Any]) -> None:
    backend = make_backend(CHART)

    chart.Client(backend).get(ChartParams(symbol="AAPL", include_ext=True))

    assert backend.last_params["includePrePost"] == "true"


def test_missing_bounds_are_sent_as_unset(make_backend: Callable[..., Any]) -> None:
    backend = make_backend(CHART)

    chart.Client(backend).get(ChartParams(symbol="AAPL", start=JAN_1))

    assert backend.last_params["period1"] == str(JAN_1.to_unix())
    assert backend.last_params["period2"] == "-1"
    assert "interval" not in backend.last_params
    assert "includePrePost" not in backend.last_params


def test_start_after_end_fails_without_a_request(make_backend: Callable[..., Any]) -> None:
    backend = make_backend(CHART)

    it = chart.Client(backend).get(ChartParams(symbol="AAPL", start=FEB_1, end=JAN_1))

    assert it.next() is False
    assert isinstance(it.err, ChartTimeError)
    assert it.err.kind == "argument"
    assert backend.call_count == 0


@pytest.mark.parametrize("params", [None, ChartParams(), ChartParams(symbol="   ")])
def test_missing_symbol_is_an_argument_error(
    params: ChartParams | None, make_backend: Callable[..., Any]
) -> None:
    backend = make_backend(CHART)

    it = chart.Client(backend).get(params)

    assert isinstance(it.err, ArgumentError)
    assert backend.call_count == 0


def test_empty_chart_is_not_an_error(make_backend: Callable[..., Any]) -> None:
    it = chart.Client(make_backend(NO_BARS)).get(ChartParams(symbol="AAPL"))

    assert it.next() is False
    assert it.err is None
    assert it.meta is not None


def test_historical_quote_returns_the_first_daily_bar(make_backend: Callable[..., Any]) -> None:
    backend = make_backend(CHART)

    bar = chart.Client(backend).get_historical_quote("AAPL", 1, 2, 2024)

    assert isinstance(bar, ChartBar)
    assert bar.timestamp == 1704205800
    day = Datetime(day=2, month=1, year=2024).to_unix()
    assert backend.last_params["period1"] == str(day)
    assert backend.last_params["period2"] == str(day)
    assert backend.last_params["interval"] == "1d"


def test_historical_quote_on_a_non_trading_day_is_none(
    make_backend: Callable[..., Any],
) -> None:
    assert chart.Client(make_backend(NO_BARS)).get_historical_quote("AAPL", 1, 6, 2024) is None


def test_historical_quote_rejects_impossible_dates(make_backend: Callable[..., Any]) -> None:
    backend = make_backend(CHART)

    with pytest.raises(ArgumentError):
        chart.Client(backend).get_historical_quote("AAPL", 2, 30, 2024)
    assert backend.call_count == 0


def test_historical_quote_raises_remote_errors(make_backend: Callable[..., Any]) -> None:
    body = {"chart": {"result": None, "error": {"code": "Not Found", "description": "delisted"}}}
    set_backend(SupportedBackend.YAHOO, make_backend(body))

    with pytest.raises(RemoteError, match="delisted"):
        chart.get_historical_quote("ZZZZ", 1, 2, 2024)
