# src/finance_api/domain/entities/options.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Option Entities.

Purpose:
    Option contracts, straddles and the chain metadata returned by the
    ``v7/finance/options/{symbol}`` endpoint.

Layer: domain/entities
"""

from __future__ import annotations

from finance_api.domain.entities.base import ProviderModel
from finance_api.domain.entities.quote import Quote


class OptionContract(ProviderModel):
    """A single call or put contract."""

    contract_symbol: str = ""
    strike: float | None = None
    currency: str | None = None
    last_price: float | None = None
    change: float | None = None
    percent_change: float | None = None
    volume: int | None = None
    open_interest: int | None = None
    bid: float | None = None
    ask: float | None = None
    contract_size: str | None = None
    expiration: int | None = None
    last_trade_date: int | None = None
    implied_volatility: float | None = None
    in_the_money: bool | None = None


class Straddle(ProviderModel):
    """Call and put sharing one strike and expiration."""

    strike: float | None = None
    call: OptionContract | None = None
    put: OptionContract | None = None


class OptionsMeta(ProviderModel):
    """Chain-level metadata promoted out of the options response.

    Attributes:
        underlying_symbol: Symbol of the underlier.
        expiration_date: The single expiration the items belong to (unix seconds).
        all_expiration_dates: Every expiration listed for the underlier.
        strikes: Every strike listed for the underlier.
        has_mini_options: Whether mini contracts exist for the expiration.
        quote: Underlier quote, when supplied by the provider.
    """

    underlying_symbol: str = ""
    expiration_date: int | None = None
    all_expiration_dates: list[int] = []
    strikes: list[float] = []
    has_mini_options: bool = False
    quote: Quote | None = None


__all__ = ["OptionContract", "OptionsMeta", "Straddle"]
