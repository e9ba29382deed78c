# src/finance_api/infrastructure/external_apis/yahoo/session.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Yahoo cookie/crumb session.

The quote, chart and options endpoints require a ``crumb`` query parameter
that is only valid together with the session cookies it was issued for.
Obtaining one is a two-step exchange:

1. ``GET`` the login host; keep every cookie that carries an expiry and is
   not named ``AS``. The session expires with the earliest of those cookies,
   and never later than one year from now.
2. ``GET`` the crumb URL presenting those cookies; the response body is the
   crumb.

Redirects are followed on both steps; cookies are read from the final response.

:class:`YahooSession` performs the exchange lazily and again after expiry.
Refresh is serialized by a lock, so concurrent callers either see the old
non-expired credentials or the complete new ones.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Final

import httpx

from finance_api.config.settings import FinanceSettings
from finance_api.domain.exceptions import RemoteError, TransportError
from finance_api.domain.value_objects import RequestContext
from finance_api.infrastructure.logging.logger import get_json_logger
from finance_api.infrastructure.observability.metrics import observe_upstream_request

logger = get_json_logger(__name__)

_PROVIDER: Final[str] = "yahoo"
_SKIPPED_COOKIE: Final[str] = "AS"
_MAX_SESSION_S: Final[float] = 365 * 24 * 3600.0

_COOKIE_HEADERS: Final[dict[str, str]] = {
    "Accept": "*/*",
    "Accept-Encoding": "gzip, deflate",
    "Accept-Language": "en-US,en;q=0.5",
    "Connection": "keep-alive",
    "Sec-Fetch-Dest": "document",
    "Sec-Fetch-Mode": "navigate",
    "Sec-Fetch-Site": "none",
    "Sec-Fetch-User": "?1",
    "Upgrade-Insecure-Requests": "1",
}

_CRUMB_HEADERS: Final[dict[str, str]] = {
    "Accept": "*/*",
    "Accept-Encoding": "gzip, deflate",
    "Accept-Language": "en-US,en;q=0.5",
    "Connection": "keep-alive",
    "Content-Type": "text/plain",
    "Sec-Fetch-Dest": "empty",
    "Sec-Fetch-Mode": "cors",
    "Sec-Fetch-Site": "same-site",
}


@dataclass(frozen=True, slots=True)
class SessionCredentials:
    """Cookie header, crumb and expiry (unix seconds) of one session."""

    cookies: str = ""
    crumb: str = ""
    expiry: float = 0.0

    def expired(self, now: float | None = None) -> bool:
        current = time.time() if now is None else now
        return self.expiry <= current


def select_cookies(jar: httpx.Cookies, now: float | None = None) -> tuple[str, float]:
    """Build the ``Cookie`` header value and session expiry from a cookie jar.

    Args:
        jar: Cookies set by the login host.
        now: Reference time (unix seconds); defaults to the current time.

    Returns:
        tuple[str, float]: ``("a=1; b=2", expiry)``.
    """
    current = time.time() if now is None else now
    expiry = current + _MAX_SESSION_S
    pairs: list[str] = []
    for cookie in jar.jar:
        if cookie.expires is None or cookie.expires <= 0:
            continue
        if cookie.name == _SKIPPED_COOKIE:
            continue
        pairs.append(f"{cookie.name}={cookie.value}")
        expiry = min(expiry, float(cookie.expires))
    return "; ".join(pairs), expiry


class YahooSession:
    """Lazily refreshed cookie/crumb session.

    Args:
        client: HTTP client used for the cookie and crumb exchanges.
        settings: Provides the cookie/crumb URLs, user agent and timeout.
    """

    def __init__(self, client: httpx.Client, settings: FinanceSettings) -> None:
        self._client = client
        self._settings = settings
        self._lock = threading.Lock()
        self._credentials = SessionCredentials()
        self.refresh_count = 0

    @property
    def credentials(self) -> SessionCredentials:
        """The current credentials (possibly expired)."""
        return self._credentials

    def current(self, context: RequestContext | None = None) -> SessionCredentials:
        """Return non-expired credentials, refreshing them if needed.

        Raises:
            TransportError: The cookie or crumb request failed to execute.
            RemoteError: The crumb host answered with an error status.
        """
        creds = self._credentials
        if not creds.expired():
            return creds
        with self._lock:
            creds = self._credentials
            if creds.expired():
                creds = self._refresh(context)
            return creds

    def invalidate(self) -> None:
        """Force a refresh on the next :meth:`current` call."""
        with self._lock:
            self._credentials = SessionCredentials()

    def _refresh(self, context: RequestContext | None) -> SessionCredentials:
        timeout = self._timeout(context)
        cookies, expiry = self._fetch_cookies(timeout)
        crumb = self._fetch_crumb(cookies, timeout)
        self._credentials = SessionCredentials(cookies=cookies, crumb=crumb, expiry=expiry)
        self.refresh_count += 1
        logger.info(
            "yahoo.session.refreshed",
            extra={"extra": {"expiry": expiry, "has_crumb": bool(crumb)}},
        )
        return self._credentials

    def _timeout(self, context: RequestContext | None) -> float:
        if context is None:
            return self._settings.timeout_s
        if context.expired():
            raise TransportError("request deadline exceeded before session refresh")
        return context.effective_timeout(self._settings.timeout_s)

    def _fetch_cookies(self, timeout: float) -> tuple[str, float]:
        headers = {**_COOKIE_HEADERS, "User-Agent": self._settings.user_agent}
        with observe_upstream_request(provider=_PROVIDER, endpoint="cookie") as obs:
            try:
                response = self._client.get(
                    self._settings.cookie_url,
                    headers=headers,
                    timeout=timeout,
                    follow_redirects=True,
                )
            except httpx.RequestError as exc:
                obs.mark_error(type(exc).__name__)
                logger.error("yahoo.session.cookie_failed", extra={"extra": {"error": str(exc)}})
                raise TransportError(
                    "cookie request failed", details={"url": self._settings.cookie_url}
                ) from exc
            obs.record_status(response.status_code)
        return select_cookies(response.cookies)

    def _fetch_crumb(self, cookies: str, timeout: float) -> str:
        headers = {**_CRUMB_HEADERS, "User-Agent": self._settings.user_agent}
        if cookies:
            headers["Cookie"] = cookies
        with observe_upstream_request(provider=_PROVIDER, endpoint="crumb") as obs:
            try:
                response = self._client.get(
                    self._settings.crumb_url,
                    headers=headers,
                    timeout=timeout,
                    follow_redirects=True,
                )
            except httpx.RequestError as exc:
                obs.mark_error(type(exc).__name__)
                logger.error("yahoo.session.crumb_failed", extra={"extra": {"error": str(exc)}})
                raise TransportError(
                    "crumb request failed", details={"url": self._settings.crumb_url}
                ) from exc
            obs.record_status(response.status_code)
            if response.status_code >= 400:
                obs.mark_error(f"http_{response.status_code}")
                logger.error(
                    "yahoo.session.crumb_rejected",
                    extra={"extra": {"status": response.status_code}},
                )
                raise RemoteError(
                    "crumb request rejected by upstream api",
                    details={"status": response.status_code},
                )
        return response.text.strip()


__all__ = ["SessionCredentials", "YahooSession", "select_cookies"]
