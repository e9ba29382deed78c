# tests/unit/domain/test_entities.py
from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from finance_api.domain.entities import ETF, ChartBar, CryptoPair, Equity, Quote
from finance_api.domain.enums import MarketState, QuoteType


def test_chart_bar_rejects_negative_volume() -> None:
    with pytest.raises(ValueError):
        ChartBar(
            timestamp=1,
            open=Decimal(1),
            high=Decimal(1),
            low=Decimal(1),
            close=Decimal(1),
            volume=-1,
        )


def test_chart_bar_adj_close_defaults_to_zero() -> None:
    bar = ChartBar(
        timestamp=1,
        open=Decimal(1),
        high=Decimal(2),
        low=Decimal("0.5"),
        close=Decimal("1.5"),
        volume=0,
    )

    assert bar.adj_close == Decimal(0)


def test_quote_reads_provider_camel_case_and_ignores_unknown_keys() -> None:
    q = Quote.model_validate(
        {
            "symbol": "AAPL",
            "regularMarketChangePercent": 1.25,
            "marketState": "PRE",
            "notAField": True,
        }
    )

    assert q.regular_market_change_percent == 1.25
    assert q.market_state == MarketState.PRE
    assert not hasattr(q, "not_a_field")


def test_quote_type_accepts_unknown_provider_values() -> None:
    assert Quote.model_validate({"quoteType": "EQUITY"}).quote_type == QuoteType.EQUITY
    assert Quote.model_validate({"quoteType": "WARRANT"}).quote_type == "WARRANT"


def test_domain_specific_aliases() -> None:
    eq = Equity.model_validate({"forwardPE": 20.5, "trailingPE": 25.0})
    fund = ETF.model_validate({"yield": 0.013})
    pair = CryptoPair.model_validate({"volume24Hr": 123456})

    assert eq.forward_pe == 20.5
    assert eq.trailing_pe == 25.0
    assert fund.yield_ == 0.013
    assert pair.volume_24_hr == 123456


def test_records_are_immutable() -> None:
    q = Quote.model_validate({"symbol": "AAPL"})

    with pytest.raises(ValidationError):
        q.symbol = "MSFT"  # type: ignore[misc]
