# src/finance_api/domain/value_objects/value_objects.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Calendar and request-scope Value Objects (Domain Layer).

Purpose:
    Small immutable values threaded through query parameters:

    * :class:`Datetime` — a calendar date used as a chart bound or an option
      expiration, optionally pinned to an exact instant.
    * :class:`RequestContext` — the per-request timeout/deadline handle honored
      by the HTTP backend.

Layer:
    domain/value_objects
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import date, datetime

__all__ = ["Datetime", "RequestContext"]

# Calendar dates without an explicit instant resolve to the US market open.
_MARKET_OPEN_HOUR = 9
_MARKET_OPEN_MINUTE = 30


@dataclass(frozen=True, slots=True)
class Datetime:
    """A calendar date that is either the start or the end of a series.

    Args:
        day: Day of month (1-31).
        month: Month (1-12).
        year: Four-digit year.
        moment: Optional exact instant. When omitted the date resolves to
            09:30 local time.

    Raises:
        ValueError: If the day/month/year triple is not a valid date.
    """

    day: int
    month: int
    year: int
    moment: datetime | None = None

    def __post_init__(self) -> None:
        date(self.year, self.month, self.day)

    @classmethod
    def from_datetime(cls, value: datetime) -> Datetime:
        """Build a :class:`Datetime` pinned to ``value``."""
        return cls(day=value.day, month=value.month, year=value.year, moment=value)

    @classmethod
    def from_unix(cls, timestamp: int) -> Datetime:
        """Build a :class:`Datetime` from unix seconds (local timezone)."""
        return cls.from_datetime(datetime.fromtimestamp(timestamp).astimezone())

    def time(self) -> datetime:
        """Return the instant this value resolves to."""
        if self.moment is not None:
            return self.moment
        return datetime(
            self.year, self.month, self.day, _MARKET_OPEN_HOUR, _MARKET_OPEN_MINUTE
        ).astimezone()

    def to_unix(self) -> int:
        """Return the resolved instant as unix seconds."""
        return int(self.time().timestamp())


@dataclass(frozen=True, slots=True)
class RequestContext:
    """Timeout/deadline handle for a single upstream request.

    Attributes:
        timeout_s: Per-request timeout in seconds (overrides the backend default).
        deadline: Absolute deadline as unix seconds. A request whose deadline
            has already passed is never sent.
    """

    timeout_s: float | None = None
    deadline: float | None = None

    @classmethod
    def with_timeout(cls, seconds: float) -> RequestContext:
        """Return a context whose deadline is ``seconds`` from now."""
        return cls(timeout_s=seconds, deadline=time.time() + seconds)

    def remaining(self, now: float | None = None) -> float | None:
        """Return seconds left before the deadline, or ``None`` without one."""
        if self.deadline is None:
            return None
        current = time.time() if now is None else now
        return self.deadline - current

    def expired(self, now: float | None = None) -> bool:
        """Return True when the deadline has passed."""
        left = self.remaining(now)
        return left is not None and left <= 0

    def effective_timeout(self, default: float, now: float | None = None) -> float:
        """Resolve the timeout for one request: the tightest of all bounds."""
        candidates = [default]
        if self.timeout_s is not None:
            candidates.append(self.timeout_s)
        left = self.remaining(now)
        if left is not None:
            candidates.append(max(left, 0.0))
        return min(candidates)
