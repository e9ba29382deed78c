# src/finance_api/adapters/normalizers.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Adapter: provider envelopes → query results.

Each endpoint family wraps its payload in one top-level key
(``quoteResponse``, ``chart``, ``optionChain``) holding ``result`` and
``error``. The normalizers here decode a raw body and unwrap it into a
:class:`~finance_api.application.iter.QueryResult`.

Design principles:
    * An envelope-level error always wins over any items present.
    * Item order is provider order; nothing is re-sorted.
    * Any decode failure, shape mismatch or envelope error raises
      :class:`RemoteError`; the query function turns it into the iterator's
      terminal error.
    * Chart arrays are zipped index by index; ``null`` entries become zero and
      a missing adjusted-close block leaves ``adj_close`` at zero.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping, Sequence
from decimal import Decimal
from typing import Any, cast

from pydantic import BaseModel, ValidationError

from finance_api.application.iter import QueryResult
from finance_api.domain.entities import (
    ChartBar,
    ChartMeta,
    OptionContract,
    OptionsMeta,
    Quote,
    Straddle,
)
from finance_api.domain.exceptions import RemoteError
from finance_api.infrastructure.external_apis.yahoo.types import (
    ChartIndicators,
    ChartResult,
    OptionResult,
    OptionsBlock,
)
from finance_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)

NO_CHART_RESULTS = "no results in chart response"
MALFORMED_CHART = "malformed chart response"
NO_OPTION_RESULTS = "no results in option straddle response"
MALFORMED_BODY = "malformed response body"

_ZERO = Decimal(0)


# --------------------------------------------------------------------------- #
# Envelope helpers
# --------------------------------------------------------------------------- #


def decode_envelope(body: bytes, key: str) -> dict[str, Any]:
    """Decode ``body`` and return the family member ``key``.

    Args:
        body: Raw response body.
        key: Top-level wrapper key of the endpoint family.

    Returns:
        dict: The inner ``{result, error}`` object.

    Raises:
        RemoteError: The body is not JSON, or the wrapper key is absent.
    """
    try:
        raw = json.loads(body)
    except ValueError as exc:
        logger.error(
            "finance.response.undecodable",
            extra={"extra": {"family": key, "error": str(exc)}},
        )
        raise RemoteError(MALFORMED_BODY, details={"family": key}) from exc

    inner = raw.get(key) if isinstance(raw, dict) else None
    if not isinstance(inner, dict):
        logger.error("finance.response.missing_envelope", extra={"extra": {"family": key}})
        raise RemoteError(f"missing {key} in response", details={"family": key})
    return inner


def raise_envelope_error(inner: Mapping[str, Any]) -> None:
    """Raise the envelope-level error, if the provider reported one."""
    error = inner.get("error")
    if error:
        raise RemoteError.from_envelope(error)


def _first_result(inner: Mapping[str, Any]) -> Any:
    results = inner.get("result")
    if not isinstance(results, list) or not results:
        return None
    return results[0]


def _validate[ModelT: BaseModel](model: type[ModelT], data: Any, family: str) -> ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        logger.error(
            "finance.response.invalid_record",
            extra={"extra": {"family": family, "model": model.__name__, "error": str(exc)}},
        )
        raise RemoteError(
            f"malformed {family} response", details={"model": model.__name__}
        ) from exc


# --------------------------------------------------------------------------- #
# List family
# --------------------------------------------------------------------------- #


def normalize_list[QuoteT: Quote](
    model: type[QuoteT],
) -> Callable[[bytes], QueryResult[QuoteT, None]]:
    """Return a normalizer decoding ``quoteResponse.result`` into ``model``.

    Args:
        model: :class:`Quote` subclass for the domain (equity, etf, ...).
    """

    def _normalize(body: bytes) -> QueryResult[QuoteT, None]:
        inner = decode_envelope(body, "quoteResponse")
        raise_envelope_error(inner)
        rows = inner.get("result") or []
        if not isinstance(rows, list):
            raise RemoteError("malformed quote response", details={"expected": "result:list"})
        items = [_validate(model, row, "quote") for row in rows if row is not None]
        return QueryResult(None, items, None)

    return _normalize


# --------------------------------------------------------------------------- #
# Chart family
# --------------------------------------------------------------------------- #


def _to_decimal(value: Any) -> Decimal:
    if value is None:
        return _ZERO
    return Decimal(str(value))


def _series(block: Mapping[str, Any], name: str, length: int) -> Sequence[Any]:
    values = block.get(name)
    if length == 0:
        return ()
    if not isinstance(values, list) or len(values) < length:
        raise RemoteError(MALFORMED_CHART, details={"series": name, "expected": length})
    return values


def _chart_result(inner: Mapping[str, Any]) -> tuple[ChartResult, ChartIndicators]:
    result = _first_result(inner)
    if not isinstance(result, dict):
        raise RemoteError(NO_CHART_RESULTS)
    indicators = result.get("indicators")
    if not isinstance(indicators, dict):
        raise RemoteError(NO_CHART_RESULTS)
    quotes = indicators.get("quote")
    if not isinstance(quotes, list) or not quotes or not isinstance(quotes[0], dict):
        raise RemoteError(NO_CHART_RESULTS)
    return cast(ChartResult, result), cast(ChartIndicators, indicators)


def normalize_chart(body: bytes) -> QueryResult[ChartBar, ChartMeta]:
    """Zip a chart envelope into one :class:`ChartBar` per timestamp.

    A populated result with zero timestamps yields zero bars and no error;
    an absent result, indicators block or quote block is an error.
    """
    inner = decode_envelope(body, "chart")
    raise_envelope_error(inner)
    result, indicators = _chart_result(inner)

    meta = _validate(ChartMeta, result.get("meta") or {}, "chart")
    timestamps = result.get("timestamp") or []
    if not isinstance(timestamps, list):
        raise RemoteError(MALFORMED_CHART, details={"series": "timestamp"})
    n = len(timestamps)

    quote_block = cast(dict[str, Any], (indicators.get("quote") or [{}])[0])
    opens = _series(quote_block, "open", n)
    highs = _series(quote_block, "high", n)
    lows = _series(quote_block, "low", n)
    closes = _series(quote_block, "close", n)
    volumes = _series(quote_block, "volume", n)

    adj_blocks = indicators.get("adjclose")
    adj_closes: Sequence[Any] = ()
    if isinstance(adj_blocks, list) and adj_blocks and isinstance(adj_blocks[0], dict):
        adj_closes = _series(adj_blocks[0], "adjclose", n)

    bars: list[ChartBar] = []
    for i, ts in enumerate(timestamps):
        try:
            bar = ChartBar(
                timestamp=int(ts),
                open=_to_decimal(opens[i]),
                high=_to_decimal(highs[i]),
                low=_to_decimal(lows[i]),
                close=_to_decimal(closes[i]),
                volume=int(volumes[i] or 0),
                adj_close=_to_decimal(adj_closes[i]) if adj_closes else _ZERO,
            )
        except (TypeError, ValueError, ArithmeticError) as exc:
            raise RemoteError(MALFORMED_CHART, details={"index": i}) from exc
        bars.append(bar)

    return QueryResult(meta, bars, None)


# --------------------------------------------------------------------------- #
# Options family
# --------------------------------------------------------------------------- #


def _option_block(body: bytes) -> tuple[OptionResult, OptionsBlock]:
    inner = decode_envelope(body, "optionChain")
    raise_envelope_error(inner)
    result = _first_result(inner)
    if not isinstance(result, dict):
        raise RemoteError(NO_OPTION_RESULTS)
    blocks = result.get("options")
    if not isinstance(blocks, list) or not blocks or not isinstance(blocks[0], dict):
        raise RemoteError(NO_OPTION_RESULTS)
    return cast(OptionResult, result), cast(OptionsBlock, blocks[0])


def _options_meta(result: OptionResult, block: OptionsBlock) -> OptionsMeta:
    quote = result.get("quote")
    return _validate(
        OptionsMeta,
        {
            "underlying_symbol": result.get("underlyingSymbol") or "",
            "expiration_date": block.get("expirationDate"),
            "all_expiration_dates": result.get("expirationDates") or [],
            "strikes": result.get("strikes") or [],
            "has_mini_options": bool(
                block.get("hasMiniOptions", result.get("hasMiniOptions", False))
            ),
            "quote": quote if isinstance(quote, dict) else None,
        },
        "option",
    )


def normalize_straddles(body: bytes) -> QueryResult[Straddle, OptionsMeta]:
    """Flatten the single expiration block into straddles."""
    result, block = _option_block(body)
    meta = _options_meta(result, block)
    items = [_validate(Straddle, s, "option") for s in block.get("straddles") or [] if s]
    return QueryResult(meta, items, None)


def normalize_contracts(body: bytes) -> QueryResult[OptionContract, OptionsMeta]:
    """Flatten the single expiration block into calls followed by puts."""
    result, block = _option_block(body)
    meta = _options_meta(result, block)
    rows = [*(block.get("calls") or []), *(block.get("puts") or [])]
    items = [_validate(OptionContract, c, "option") for c in rows if c]
    return QueryResult(meta, items, None)


__all__ = [
    "MALFORMED_BODY",
    "MALFORMED_CHART",
    "NO_CHART_RESULTS",
    "NO_OPTION_RESULTS",
    "decode_envelope",
    "normalize_chart",
    "normalize_contracts",
    "normalize_list",
    "normalize_straddles",
    "raise_envelope_error",
]
