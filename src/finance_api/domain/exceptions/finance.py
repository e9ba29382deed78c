# src/finance_api/domain/exceptions/finance.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Finance Domain Exceptions.

Synopsis:
    Error kinds produced while building, executing and decoding provider
    queries. They are carried as values inside an iterator (see
    :class:`finance_api.application.iter.Iter`) and only raised by the
    single-result convenience accessors.

Design:
    * Inherit from :class:`DomainError` for consistent ``.code`` and ``.details``.
    * ``kind`` is a short string tag (``argument`` / ``remote`` / ``transport``)
      that callers can branch on without importing concrete classes.

Layer:
    domain/exceptions
"""

from __future__ import annotations

from typing import Any, ClassVar

from finance_api.domain.exceptions.base import DomainError

ERROR_DESCRIPTION_ARGUMENTS = "missing function argument"
ERROR_DESCRIPTION_TIME_RANGE = "time range: start is after end"
ERROR_DESCRIPTION_UPSTREAM = "error response received from upstream api"


class FinanceError(DomainError):
    """Base class for errors that terminate a query.

    Attributes:
        kind: String tag classifying the failure.
        code: Stable, machine-readable error code.
    """

    kind: ClassVar[str] = "finance"
    code = "finance-error"

    def __str__(self) -> str:
        return f"code: {self.code}, detail: {self.message}"


class ArgumentError(FinanceError):
    """Caller supplied insufficient identifying input.

    Detected before any network call is attempted.
    """

    kind = "argument"
    code = "argument-error"

    def __init__(
        self,
        message: str = ERROR_DESCRIPTION_ARGUMENTS,
        *,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details)


class ChartTimeError(ArgumentError):
    """Chart start bound is chronologically after the end bound."""

    def __init__(
        self,
        message: str = ERROR_DESCRIPTION_TIME_RANGE,
        *,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details)


class RemoteError(FinanceError):
    """Provider returned an error status, an error envelope or a malformed body.

    Typical causes:
        * HTTP status >= 400
        * ``{"error": {"code": ..., "description": ...}}`` inside the envelope
        * JSON that cannot be decoded or lacks the expected result block
    """

    kind = "remote"
    code = "api-error"

    @classmethod
    def from_envelope(cls, error: Any) -> RemoteError:
        """Build a remote error from a provider ``{code, description}`` object.

        Args:
            error: The decoded ``error`` member of a provider envelope.

        Returns:
            RemoteError: Error carrying the provider code/description in ``details``.
        """
        if isinstance(error, dict):
            code = error.get("code")
            description = error.get("description")
            message = str(description or code or ERROR_DESCRIPTION_UPSTREAM)
            return cls(message, details={"code": code, "description": description})
        return cls(str(error))


class TransportError(FinanceError):
    """Request construction or execution failed below the application layer.

    Typical causes:
        * DNS / TLS / connection failures
        * Timeouts and exhausted deadlines
        * Body read failures
    """

    kind = "transport"
    code = "transport-error"
