# src/finance_api/dependencies/backends.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Backend registry (composition root).

Overview:
    The module-level convenience functions of every client façade resolve
    their transport here. Each supported backend is built lazily on first
    use and then shared by every caller in the process.

Layer:
    dependencies

Design:
    * Reads of an initialized backend take no lock.
    * First initialization takes the registry lock and double-checks, so
      concurrent first callers all observe the same fully-built instance.
    * Tests replace transports with :func:`set_backend`, or swap the HTTP
      client used for lazily built backends with :func:`set_http_client`.
    * Façade ``Client`` classes accept an explicit backend; the registry is
      only a default.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum

import httpx

from finance_api.application.interfaces.backend import Backend
from finance_api.config.settings import get_settings
from finance_api.infrastructure.external_apis.yahoo.client import (
    BackendConfiguration,
    YahooBackend,
)
from finance_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)

# The uploads backend has no public host; requests against it fail as
# transport errors until a URL is configured through ``set_backend``.
BATS_URL = ""


class SupportedBackend(str, Enum):
    """Backends known to the registry."""

    YAHOO = "yahoo"
    BATS = "bats"

    def __str__(self) -> str:
        return self.value


@dataclass
class Backends:
    """A set of transports, one per :class:`SupportedBackend`."""

    yahoo: Backend | None = None
    bats: Backend | None = None

    def get(self, kind: SupportedBackend) -> Backend | None:
        return self.yahoo if kind is SupportedBackend.YAHOO else self.bats

    def set(self, kind: SupportedBackend, backend: Backend | None) -> None:
        if kind is SupportedBackend.YAHOO:
            self.yahoo = backend
        else:
            self.bats = backend


_lock = threading.Lock()
_backends = Backends()
_http_client: httpx.Client | None = None


def _build(kind: SupportedBackend, http: httpx.Client | None) -> Backend:
    if kind is SupportedBackend.YAHOO:
        return YahooBackend(get_settings().base_url, http=http)
    return BackendConfiguration(str(kind), BATS_URL, http=http)


def new_backends(http: httpx.Client) -> Backends:
    """Build a fresh, unregistered set of backends sharing ``http``.

    Args:
        http: Client used by every backend in the set.

    Returns:
        Backends: Independent of the process-wide registry.
    """
    return Backends(
        yahoo=_build(SupportedBackend.YAHOO, http),
        bats=_build(SupportedBackend.BATS, http),
    )


def get_backend(kind: SupportedBackend | str = SupportedBackend.YAHOO) -> Backend:
    """Return the registered backend, building it on first use.

    Args:
        kind: Which backend to resolve.

    Returns:
        Backend: The shared instance.

    Raises:
        ValueError: ``kind`` names no supported backend.
    """
    resolved = SupportedBackend(kind)
    backend = _backends.get(resolved)
    if backend is not None:
        return backend

    with _lock:
        backend = _backends.get(resolved)
        if backend is None:
            backend = _build(resolved, _http_client)
            _backends.set(resolved, backend)
            logger.debug(
                "finance.backend.initialized",
                extra={"extra": {"backend": str(resolved)}},
            )
        return backend


def set_backend(kind: SupportedBackend | str, backend: Backend | None) -> None:
    """Install ``backend`` for ``kind`` (``None`` restores lazy building)."""
    resolved = SupportedBackend(kind)
    with _lock:
        _backends.set(resolved, backend)


def set_http_client(client: httpx.Client | None) -> None:
    """Use ``client`` for backends built from now on.

    Registered backends are discarded so the next :func:`get_backend` call
    builds them on top of the new client. Overrides installed with
    :func:`set_backend` must be installed again afterwards.
    """
    global _http_client
    with _lock:
        _http_client = client
        _backends.set(SupportedBackend.YAHOO, None)
        _backends.set(SupportedBackend.BATS, None)


def reset_backends() -> None:
    """Drop every registered backend and the HTTP client override."""
    set_http_client(None)


__all__ = [
    "BATS_URL",
    "Backends",
    "SupportedBackend",
    "get_backend",
    "new_backends",
    "reset_backends",
    "set_backend",
    "set_http_client",
]
