# tests/unit/adapters/test_normalizers.py
from __future__ import annotations

import copy
import json
from collections.abc import Callable
from decimal import Decimal
from typing import Any

import pytest

from finance_api.adapters.normalizers import (
    MALFORMED_BODY,
    MALFORMED_CHART,
    NO_CHART_RESULTS,
    NO_OPTION_RESULTS,
    decode_envelope,
    normalize_chart,
    normalize_contracts,
    normalize_list,
    normalize_straddles,
)
from finance_api.application.iter import Iter
from finance_api.application.query import Request, make_query
from finance_api.domain.entities import ChartMeta, Equity, OptionsMeta, Quote
from finance_api.domain.exceptions import RemoteError

CHART_BODY: dict[str, Any] = {
    "chart": {
        "result": [
            {
                "meta": {
                    "currency": "USD",
                    "symbol": "AAPL",
                    "exchangeName": "NMS",
                    "regularMarketPrice": 2.2,
                    "validRanges": ["1d", "5d"],
                },
                "timestamp": [100, 200],
                "indicators": {
                    "quote": [
                        {
                            "open": [1.0, 2.0],
                            "high": [1.5, 2.5],
                            "low": [0.5, 1.5],
                            "close": [1.2, 2.2],
                            "volume": [10, 20],
                        }
                    ],
                    "adjclose": [{"adjclose": [1.1, 2.1]}],
                },
            }
        ],
        "error": None,
    }
}

QUOTE_BODY: dict[str, Any] = {
    "quoteResponse": {
        "result": [
            {
                "symbol": "AAPL",
                "quoteType": "EQUITY",
                "marketState": "REGULAR",
                "regularMarketPrice": 190.5,
                "forwardPE": 28.1,
                "averageDailyVolume3Month": 55000000,
                "someNewProviderField": "ignored",
            },
            {"symbol": "MSFT", "quoteType": "EQUITY", "regularMarketPrice": 410.0},
        ],
        "error": None,
    }
}

OPTIONS_BODY: dict[str, Any] = {
    "optionChain": {
        "result": [
            {
                "underlyingSymbol": "AAPL",
                "expirationDates": [1700000000, 1700600000],
                "strikes": [180.0, 185.0],
                "hasMiniOptions": False,
                "quote": {"symbol": "AAPL", "regularMarketPrice": 182.0},
                "options": [
                    {
                        "expirationDate": 1700000000,
                        "hasMiniOptions": True,
                        "straddles": [
                            {
                                "strike": 180.0,
                                "call": {"contractSymbol": "AAPL231114C00180000"},
                                "put": {"contractSymbol": "AAPL231114P00180000"},
                            },
                            {
                                "strike": 185.0,
                                "call": {"contractSymbol": "AAPL231114C00185000"},
                            },
                        ],
                        "calls": [
                            {"contractSymbol": "C180", "strike": 180.0, "inTheMoney": True},
                        ],
                        "puts": [
                            {"contractSymbol": "P180", "strike": 180.0},
                            {"contractSymbol": "P185", "strike": 185.0},
                        ],
                    }
                ],
            }
        ],
        "error": None,
    }
}


def _encode(payload: dict[str, Any]) -> bytes:
    return json.dumps(payload).encode("utf-8")


def _chart(**indicator_overrides: Any) -> dict[str, Any]:
    body = copy.deepcopy(CHART_BODY)
    body["chart"]["result"][0]["indicators"].update(indicator_overrides)
    return body


# --------------------------------------------------------------------------- #
# Envelope
# --------------------------------------------------------------------------- #


def test_decode_envelope_rejects_non_json() -> None:
    with pytest.raises(RemoteError) as exc:
        decode_envelope(b"<html>oops</html>", "chart")
    assert exc.value.message == MALFORMED_BODY


def test_decode_envelope_rejects_missing_wrapper() -> None:
    with pytest.raises(RemoteError):
        decode_envelope(b'{"finance": {"error": null}}', "quoteResponse")


# --------------------------------------------------------------------------- #
# List family
# --------------------------------------------------------------------------- #


def test_list_items_keep_provider_order_and_aliases() -> None:
    result = normalize_list(Equity)(_encode(QUOTE_BODY))

    assert result.meta is None
    assert result.error is None
    assert [q.symbol for q in result.items] == ["AAPL", "MSFT"]
    first = result.items[0]
    assert isinstance(first, Equity)
    assert first.forward_pe == 28.1
    assert first.average_daily_volume_3_month == 55000000
    assert first.quote_type == "EQUITY"


def test_list_envelope_error_wins_over_items() -> None:
    body = copy.deepcopy(QUOTE_BODY)
    body["quoteResponse"]["error"] = {"code": "Bad Request", "description": "invalid symbols"}

    with pytest.raises(RemoteError) as exc:
        normalize_list(Quote)(_encode(body))

    assert exc.value.message == "invalid symbols"
    assert exc.value.details == {"code": "Bad Request", "description": "invalid symbols"}


def test_list_null_result_yields_no_items() -> None:
    result = normalize_list(Quote)(_encode({"quoteResponse": {"result": None, "error": None}}))

    assert list(result.items) == []


def test_list_rejects_records_of_the_wrong_shape() -> None:
    body = {"quoteResponse": {"result": [{"symbol": ["not", "a", "string"]}], "error": None}}

    with pytest.raises(RemoteError):
        normalize_list(Quote)(_encode(body))


# --------------------------------------------------------------------------- #
# Chart family
# --------------------------------------------------------------------------- #


def test_chart_zips_parallel_arrays_in_order() -> None:
    meta, bars, error = normalize_chart(_encode(CHART_BODY))

    assert error is None
    assert len(bars) == 2
    assert bars[0].timestamp == 100
    assert bars[0].close == Decimal("1.2")
    assert bars[0].open == Decimal("1.0")
    assert bars[0].volume == 10
    assert bars[0].adj_close == Decimal("1.1")
    assert bars[1].timestamp == 200
    assert bars[1].close == Decimal("2.2")
    assert isinstance(meta, ChartMeta)
    assert meta.symbol == "AAPL"
    assert meta.exchange_name == "NMS"
    assert meta.valid_ranges == ["1d", "5d"]


def test_chart_missing_adjclose_leaves_zero() -> None:
    body = copy.deepcopy(CHART_BODY)
    del body["chart"]["result"][0]["indicators"]["adjclose"]

    _, bars, _ = normalize_chart(_encode(body))

    assert [b.adj_close for b in bars] == [Decimal(0), Decimal(0)]


def test_chart_null_entries_become_zero() -> None:
    body = _chart(
        quote=[
            {
                "open": [None, 2.0],
                "high": [1.5, 2.5],
                "low": [0.5, 1.5],
                "close": [1.2, None],
                "volume": [None, 20],
            }
        ]
    )

    _, bars, _ = normalize_chart(_encode(body))

    assert bars[0].open == Decimal(0)
    assert bars[0].volume == 0
    assert bars[1].close == Decimal(0)


def test_chart_short_sibling_array_is_malformed() -> None:
    body = _chart(
        quote=[
            {
                "open": [1.0, 2.0],
                "high": [1.5, 2.5],
                "low": [0.5, 1.5],
                "close": [1.2],
                "volume": [10, 20],
            }
        ]
    )

    with pytest.raises(RemoteError) as exc:
        normalize_chart(_encode(body))
    assert exc.value.message == MALFORMED_CHART


@pytest.mark.parametrize("timestamp", [5, "100", {"0": 100}])
def test_chart_non_list_timestamp_is_malformed(timestamp: Any) -> None:
    body = {
        "chart": {
            "result": [{"timestamp": timestamp, "indicators": {"quote": [{}]}}],
            "error": None,
        }
    }

    with pytest.raises(RemoteError) as exc:
        normalize_chart(_encode(body))
    assert exc.value.message == MALFORMED_CHART


def test_chart_non_list_timestamp_fails_the_iterator_not_the_caller(
    make_backend: Callable[..., Any],
) -> None:
    body = {"chart": {"result": [{"timestamp": 5, "indicators": {"quote": [{}]}}]}}
    backend = make_backend(body)

    it = Iter(make_query(backend, Request("v8/finance/chart/AAPL"), normalize_chart))

    assert it.next() is False
    assert isinstance(it.err, RemoteError)
    assert it.err.message == MALFORMED_CHART


def test_chart_populated_structure_without_timestamps_is_empty_not_error() -> None:
    body = {
        "chart": {
            "result": [{"meta": {"symbol": "AAPL"}, "indicators": {"quote": [{}]}}],
            "error": None,
        }
    }

    meta, bars, error = normalize_chart(_encode(body))

    assert list(bars) == []
    assert error is None
    assert meta is not None and meta.symbol == "AAPL"


@pytest.mark.parametrize(
    "inner",
    [
        {"result": [], "error": None},
        {"result": None, "error": None},
        {"result": [None], "error": None},
        {"result": [{"meta": {}, "timestamp": [1]}], "error": None},
        {"result": [{"meta": {}, "indicators": None}], "error": None},
        {"result": [{"meta": {}, "indicators": {"quote": []}}], "error": None},
        {"result": [{"meta": {}, "indicators": {"quote": [None]}}], "error": None},
    ],
)
def test_chart_absent_blocks_are_remote_errors(inner: dict[str, Any]) -> None:
    with pytest.raises(RemoteError) as exc:
        normalize_chart(_encode({"chart": inner}))
    assert exc.value.message == NO_CHART_RESULTS
    assert exc.value.kind == "remote"


def test_chart_envelope_error_wins() -> None:
    body = copy.deepcopy(CHART_BODY)
    body["chart"]["error"] = {
        "code": "Not Found",
        "description": "No data found, symbol may be delisted",
    }

    with pytest.raises(RemoteError) as exc:
        normalize_chart(_encode(body))
    assert exc.value.message == "No data found, symbol may be delisted"


# --------------------------------------------------------------------------- #
# Options family
# --------------------------------------------------------------------------- #


def test_straddles_are_flattened_in_array_order() -> None:
    meta, items, error = normalize_straddles(_encode(OPTIONS_BODY))

    assert error is None
    assert [s.strike for s in items] == [180.0, 185.0]
    assert items[0].call is not None
    assert items[0].call.contract_symbol == "AAPL231114C00180000"
    assert items[1].put is None


def test_options_meta_is_promoted_from_result_and_block() -> None:
    meta, _, _ = normalize_straddles(_encode(OPTIONS_BODY))

    assert isinstance(meta, OptionsMeta)
    assert meta.underlying_symbol == "AAPL"
    assert meta.expiration_date == 1700000000
    assert meta.all_expiration_dates == [1700000000, 1700600000]
    assert meta.strikes == [180.0, 185.0]
    assert meta.has_mini_options is True
    assert meta.quote is not None
    assert meta.quote.regular_market_price == 182.0


def test_contracts_list_calls_before_puts() -> None:
    _, items, _ = normalize_contracts(_encode(OPTIONS_BODY))

    assert [c.contract_symbol for c in items] == ["C180", "P180", "P185"]
    assert items[0].in_the_money is True


@pytest.mark.parametrize(
    "result",
    [
        {"underlyingSymbol": "AAPL"},
        {"underlyingSymbol": "AAPL", "options": []},
        {"underlyingSymbol": "AAPL", "options": "garbage"},
    ],
)
def test_options_without_blocks_are_remote_errors(result: dict[str, Any]) -> None:
    body = {"optionChain": {"result": [result], "error": None}}

    with pytest.raises(RemoteError) as exc:
        normalize_straddles(_encode(body))
    assert exc.value.message == NO_OPTION_RESULTS


def test_options_envelope_error_wins() -> None:
    body = copy.deepcopy(OPTIONS_BODY)
    body["optionChain"]["error"] = {"code": "Unauthorized", "description": "Invalid Crumb"}

    with pytest.raises(RemoteError) as exc:
        normalize_contracts(_encode(body))
    assert exc.value.message == "Invalid Crumb"
