# src/finance_api/application/interfaces/backend.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Application Port: upstream backend.

The backend performs exactly one HTTP round trip per call and returns the raw
response body. It owns base-URL prefixing, session credentials, headers,
deadline handling and HTTP status classification; callers decode the body.

Design:
    * Structural typing (``Protocol``) so tests can pass any object with a
      matching ``call`` method.
    * Failures surface as :class:`TransportError` (below HTTP) or
      :class:`RemoteError` (status >= 400). No transport-library exception
      crosses this boundary.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from finance_api.domain.value_objects import RequestContext


@runtime_checkable
class Backend(Protocol):
    """Protocol for the provider transport."""

    def call(
        self,
        path: str,
        params: Sequence[tuple[str, str]],
        context: RequestContext | None = None,
    ) -> bytes:
        """Execute one GET request.

        Args:
            path: Endpoint path relative to the provider host
                (e.g. ``"v7/finance/quote"``).
            params: Ordered query-string pairs.
            context: Optional timeout/deadline handle.

        Returns:
            bytes: The full response body.

        Raises:
            TransportError: Connection, timeout or expired deadline.
            RemoteError: The provider answered with status >= 400.
        """
        ...
