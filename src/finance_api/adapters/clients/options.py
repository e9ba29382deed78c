# src/finance_api/adapters/clients/options.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Options façade: option chains for one underlier and expiration.

Every request names zero or one expiration (``date=-1`` lets the provider pick
the nearest). The chain metadata (:class:`OptionsMeta`) is available on the
iterator before the first advance.
"""

from __future__ import annotations

from finance_api.adapters.normalizers import normalize_contracts, normalize_straddles
from finance_api.application.form import encode
from finance_api.application.interfaces.backend import Backend
from finance_api.application.iter import Iter
from finance_api.application.query import Request, make_query
from finance_api.application.schemas.dto import OptionsForm, OptionsParams
from finance_api.application.schemas.dto.params import UNSET_TIME
from finance_api.dependencies.backends import SupportedBackend, get_backend
from finance_api.domain.entities import OptionContract, OptionsMeta, Straddle
from finance_api.domain.exceptions import ArgumentError

OPTIONS_PATH = "v7/finance/options/{symbol}"

type StraddleIter = Iter[Straddle, OptionsMeta]
type ContractIter = Iter[OptionContract, OptionsMeta]


class Client:
    """Options requests against an explicit or registered backend."""

    def __init__(self, backend: Backend | None = None) -> None:
        self._backend = backend

    @property
    def backend(self) -> Backend:
        return self._backend or get_backend(SupportedBackend.YAHOO)

    def get_straddle(self, underlier: str) -> StraddleIter:
        """Return straddles for the nearest expiration of ``underlier``."""
        return self.get_straddle_p(OptionsParams(underlying_symbol=underlier))

    def get_straddle_p(self, params: OptionsParams | None) -> StraddleIter:
        """Return straddles for the expiration described by ``params``."""
        request = self._request(params, straddle=True)
        if request is None:
            return Iter.from_error(ArgumentError())
        return Iter(make_query(self.backend, request, normalize_straddles))

    def get_contracts_p(self, params: OptionsParams | None) -> ContractIter:
        """Return individual contracts, calls first and then puts."""
        request = self._request(params, straddle=False)
        if request is None:
            return Iter.from_error(ArgumentError())
        return Iter(make_query(self.backend, request, normalize_contracts))

    @staticmethod
    def _request(params: OptionsParams | None, *, straddle: bool) -> Request | None:
        if params is None or not params.underlying_symbol:
            return None
        date = params.expiration.to_unix() if params.expiration is not None else UNSET_TIME
        form = OptionsForm(date=date, straddle=straddle)
        return Request.build(
            OPTIONS_PATH.format(symbol=params.underlying_symbol),
            encode(form),
            params.context,
        )


def get_straddle(underlier: str) -> StraddleIter:
    """Return straddles for the nearest expiration of ``underlier``."""
    return Client().get_straddle(underlier)


def get_straddle_p(params: OptionsParams | None) -> StraddleIter:
    return Client().get_straddle_p(params)


def get_contracts_p(params: OptionsParams | None) -> ContractIter:
    return Client().get_contracts_p(params)


__all__ = [
    "OPTIONS_PATH",
    "Client",
    "ContractIter",
    "StraddleIter",
    "get_contracts_p",
    "get_straddle",
    "get_straddle_p",
]
