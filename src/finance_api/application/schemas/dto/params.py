# src/finance_api/application/schemas/dto/params.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Query Parameter DTOs (Application Layer).

Purpose:
    * Caller-facing params (:class:`ListParams`, :class:`ChartParams`,
      :class:`OptionsParams`). Immutable; façades never write derived values
      back into them.
    * Wire forms (:class:`QuoteForm`, :class:`ChartForm`, :class:`OptionsForm`)
      holding the derived values that are encoded into the query string.

Layer: application/schemas/dto
"""

from __future__ import annotations

from pydantic import Field, InstanceOf

from finance_api.application.schemas.dto.base import BaseDTO, WireForm
from finance_api.config.settings import get_settings
from finance_api.domain.enums import Interval
from finance_api.domain.value_objects import Datetime, RequestContext

# Sent for an unset time bound or expiration.
UNSET_TIME = -1


class ListParams(BaseDTO):
    """Parameters for the quote-list family (quote, equity, etf, ...).

    Attributes:
        symbols: Symbols to look up, in request order.
        context: Optional timeout/deadline handle.
    """

    symbols: tuple[str, ...] = ()
    context: InstanceOf[RequestContext] | None = None

    @property
    def has_symbols(self) -> bool:
        """True when at least one non-blank symbol is present."""
        return any(s.strip() for s in self.symbols)


class ChartParams(BaseDTO):
    """Parameters for a historical chart request.

    Attributes:
        symbol: Instrument symbol.
        start: Inclusive start of the series; unset when omitted.
        end: End of the series; unset when omitted.
        interval: Bar aggregation; provider default when omitted.
        include_ext: Include pre/post market bars.
        context: Optional timeout/deadline handle.
    """

    symbol: str = ""
    start: InstanceOf[Datetime] | None = None
    end: InstanceOf[Datetime] | None = None
    interval: Interval | None = None
    include_ext: bool = False
    context: InstanceOf[RequestContext] | None = None


class OptionsParams(BaseDTO):
    """Parameters for an options-chain request.

    Attributes:
        underlying_symbol: Symbol of the underlier.
        expiration: Expiration to fetch; nearest when omitted.
        context: Optional timeout/deadline handle.
    """

    underlying_symbol: str = ""
    expiration: InstanceOf[Datetime] | None = None
    context: InstanceOf[RequestContext] | None = None


class QuoteForm(WireForm):
    """Wire form for ``v7/finance/quote``."""

    symbols: tuple[str, ...]


class ChartForm(WireForm):
    """Wire form for ``v8/finance/chart/{symbol}``."""

    include_pre_post: bool = False
    interval: Interval | None = None
    period1: int = UNSET_TIME
    period2: int = UNSET_TIME
    region: str = Field(default_factory=lambda: get_settings().region)
    cors_domain: str = Field(default_factory=lambda: get_settings().cors_domain)


class OptionsForm(WireForm):
    """Wire form for ``v7/finance/options/{symbol}``."""

    date: int = UNSET_TIME
    straddle: bool = True


__all__ = [
    "UNSET_TIME",
    "ChartForm",
    "ChartParams",
    "ListParams",
    "OptionsForm",
    "OptionsParams",
    "QuoteForm",
]
