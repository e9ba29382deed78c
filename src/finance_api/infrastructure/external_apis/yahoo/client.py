# src/finance_api/infrastructure/external_apis/yahoo/client.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Provider Transport Backends — blocking, instrumented.

This transport is framework-agnostic and provides:

* Blocking HTTP (httpx) with a per-request, deadline-aware timeout.
* Base-URL prefixing of endpoint paths.
* Deterministic mapping to domain errors: transport failures become
  :class:`TransportError`, status >= 400 becomes :class:`RemoteError`.
* Prometheus metrics and leveled logging (request line at INFO, timings and
  bodies at DEBUG, failures at ERRORS).

Two backends are provided:

* :class:`BackendConfiguration` — plain GET against a base URL.
* :class:`YahooBackend` — adds the session crumb, cookies and browser-like
  headers, refreshing the session transparently when it expires.

Nothing is retried.
"""

from __future__ import annotations

import time
from collections.abc import Mapping, Sequence
from typing import Final

import httpx

from finance_api.config.settings import FinanceSettings, get_settings
from finance_api.domain.exceptions import RemoteError, TransportError
from finance_api.domain.exceptions.finance import ERROR_DESCRIPTION_UPSTREAM
from finance_api.domain.value_objects import RequestContext
from finance_api.infrastructure.external_apis.yahoo.session import YahooSession
from finance_api.infrastructure.logging.logger import get_json_logger
from finance_api.infrastructure.observability.metrics import observe_upstream_request

logger = get_json_logger(__name__)

# --------------------------------------------------------------------------- #
# Defaults and headers
# --------------------------------------------------------------------------- #

_DEFAULT_HEADERS: Final[dict[str, str]] = {
    "Accept": "*/*",
    "Accept-Language": "en-US,en;q=0.5",
    "Connection": "keep-alive",
}

_YAHOO_HEADERS: Final[dict[str, str]] = {
    "Accept": "*/*",
    "Accept-Language": "en-US,en;q=0.5",
    "Connection": "keep-alive",
    "Content-Type": "application/json",
    "Origin": "https://finance.yahoo.com",
    "Referer": "https://finance.yahoo.com",
    "Sec-Fetch-Dest": "empty",
    "Sec-Fetch-Mode": "cors",
    "Sec-Fetch-Site": "same-site",
}

_CRUMB_PARAM: Final[str] = "crumb"


def endpoint_label(path: str) -> str:
    """Return a low-cardinality endpoint name for metrics and logs.

    ``v8/finance/chart/AAPL`` becomes ``chart``; symbols never become labels.
    """
    parts = [p for p in path.strip("/").split("/") if p]
    if len(parts) >= 3 and parts[1] == "finance":
        return parts[2]
    return parts[0] if parts else "root"


def new_http_client(settings: FinanceSettings | None = None) -> httpx.Client:
    """Build the default blocking client (timeout from settings, redirects followed)."""
    cfg = settings or get_settings()
    return httpx.Client(
        timeout=cfg.timeout_s,
        headers=_DEFAULT_HEADERS.copy(),
        follow_redirects=True,
    )


class BackendConfiguration:
    """Plain GET transport against one base URL."""

    def __init__(
        self,
        backend_type: str,
        url: str,
        *,
        http: httpx.Client | None = None,
        settings: FinanceSettings | None = None,
        timeout_s: float | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            backend_type: Registry name, used as the metrics ``provider`` label.
            url: Base URL every path is appended to.
            http: Optional shared ``httpx.Client``. If omitted, a client is
                created and owned by this instance.
            settings: Library settings; the cached settings when omitted.
            timeout_s: Optional default timeout override in seconds.
        """
        self._settings = settings or get_settings()
        self.backend_type = backend_type
        self.url = url.rstrip("/")
        self._timeout = float(timeout_s if timeout_s is not None else self._settings.timeout_s)
        self._owns_client = http is None
        self._client = http or new_http_client(self._settings)

    @property
    def http_client(self) -> httpx.Client:
        return self._client

    def close(self) -> None:
        """Close the underlying HTTP client if this instance owns it."""
        if self._owns_client and not self._client.is_closed:
            self._client.close()

    # ---------------------------- Public API ----------------------------- #

    def call(
        self,
        path: str,
        params: Sequence[tuple[str, str]],
        context: RequestContext | None = None,
    ) -> bytes:
        """Execute one GET request and return the body.

        Raises:
            TransportError: Expired deadline, connection failure or timeout.
            RemoteError: Status >= 400.
        """
        self._check_deadline(path, context)
        return self._execute(path, list(params), context, headers={})

    # --------------------------- Internal helpers ------------------------- #

    def _url(self, path: str) -> str:
        if not path.startswith("/"):
            path = "/" + path
        return self.url + path

    def _check_deadline(self, path: str, context: RequestContext | None) -> None:
        if context is not None and context.expired():
            logger.error(
                "finance.request.deadline_exceeded",
                extra={"extra": {"provider": self.backend_type, "path": path}},
            )
            raise TransportError("request deadline exceeded", details={"path": path})

    def _execute(
        self,
        path: str,
        params: list[tuple[str, str]],
        context: RequestContext | None,
        *,
        headers: Mapping[str, str],
    ) -> bytes:
        url = self._url(path)
        endpoint = endpoint_label(path)
        timeout = (
            context.effective_timeout(self._timeout) if context is not None else self._timeout
        )

        with observe_upstream_request(provider=self.backend_type, endpoint=endpoint) as obs:
            logger.info(
                "finance.request",
                extra={"extra": {"method": "GET", "url": url, "endpoint": endpoint}},
            )
            start = time.perf_counter()
            try:
                response = self._client.get(
                    url, params=params, headers=dict(headers), timeout=timeout
                )
            except httpx.RequestError as exc:
                obs.mark_error(type(exc).__name__)
                logger.error(
                    "finance.request.failed",
                    extra={"extra": {"url": url, "error": str(exc)}},
                )
                raise TransportError(
                    str(exc) or "request to upstream api failed",
                    details={"url": url, "exception": type(exc).__name__},
                ) from exc

            logger.debug(
                "finance.request.completed",
                extra={"extra": {"url": url, "elapsed_s": time.perf_counter() - start}},
            )
            obs.record_status(response.status_code)
            body = response.content

            if response.status_code >= 400:
                obs.mark_error(f"http_{response.status_code}")
                logger.error(
                    "finance.response.error",
                    extra={
                        "extra": {
                            "url": url,
                            "status": response.status_code,
                            "body": body.decode("utf-8", errors="replace"),
                        }
                    },
                )
                raise RemoteError(
                    ERROR_DESCRIPTION_UPSTREAM,
                    details={"status": response.status_code, "url": url},
                )

            logger.debug(
                "finance.response",
                extra={"extra": {"url": url, "body": body.decode("utf-8", errors="replace")}},
            )
            return body


class YahooBackend(BackendConfiguration):
    """Crumb-authenticated transport for the Yahoo Finance API."""

    def __init__(
        self,
        url: str | None = None,
        *,
        http: httpx.Client | None = None,
        settings: FinanceSettings | None = None,
        timeout_s: float | None = None,
        session: YahooSession | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            url: Base URL; ``settings.base_url`` when omitted.
            http: Optional shared ``httpx.Client`` (also used for the session).
            settings: Library settings; the cached settings when omitted.
            timeout_s: Optional default timeout override in seconds.
            session: Optional pre-built session (tests inject one).
        """
        cfg = settings or get_settings()
        super().__init__(
            "yahoo",
            url or cfg.base_url,
            http=http,
            settings=cfg,
            timeout_s=timeout_s,
        )
        self.session = session or YahooSession(self._client, cfg)

    def call(
        self,
        path: str,
        params: Sequence[tuple[str, str]],
        context: RequestContext | None = None,
    ) -> bytes:
        """Execute one authenticated GET request and return the body.

        Refreshes the cookie/crumb session first when it is absent or expired.
        """
        self._check_deadline(path, context)
        creds = self.session.current(context)

        pairs = list(params)
        if creds.crumb:
            pairs.append((_CRUMB_PARAM, creds.crumb))

        headers = {**_YAHOO_HEADERS, "User-Agent": self._settings.user_agent}
        if creds.cookies:
            headers["Cookie"] = creds.cookies
        return self._execute(path, pairs, context, headers=headers)


__all__ = ["BackendConfiguration", "YahooBackend", "endpoint_label", "new_http_client"]
