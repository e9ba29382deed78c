# tests/unit/domain/test_exceptions.py
from __future__ import annotations

import pytest

from finance_api.domain.exceptions import (
    ArgumentError,
    ChartTimeError,
    FinanceError,
    RemoteError,
    TransportError,
)
from finance_api.domain.exceptions.base import DomainError


@pytest.mark.parametrize(
    ("error", "kind", "code"),
    [
        (ArgumentError(), "argument", "argument-error"),
        (ChartTimeError(), "argument", "argument-error"),
        (RemoteError("x"), "remote", "api-error"),
        (TransportError("x"), "transport", "transport-error"),
    ],
)
def test_kinds_and_codes(error: FinanceError, kind: str, code: str) -> None:
    assert error.kind == kind
    assert error.code == code
    assert isinstance(error, DomainError)


def test_string_form_carries_code_and_detail() -> None:
    assert str(ArgumentError()) == "code: argument-error, detail: missing function argument"
    assert str(ChartTimeError()) == (
        "code: argument-error, detail: time range: start is after end"
    )


def test_remote_error_from_provider_envelope() -> None:
    err = RemoteError.from_envelope({"code": "Not Found", "description": "No data found"})

    assert err.message == "No data found"
    assert err.details == {"code": "Not Found", "description": "No data found"}


def test_remote_error_from_envelope_falls_back_to_code() -> None:
    assert RemoteError.from_envelope({"code": "Unauthorized"}).message == "Unauthorized"
    assert RemoteError.from_envelope("plain").message == "plain"


def test_chart_time_error_is_an_argument_error() -> None:
    with pytest.raises(ArgumentError):
        raise ChartTimeError(details={"period1": 2, "period2": 1})
