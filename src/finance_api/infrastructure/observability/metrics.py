# src/finance_api/infrastructure/observability/metrics.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Upstream request observability helpers and Prometheus metrics.

Exports
-------
Core collectors (names are part of the public contract and must remain stable):

* ``finance_api_upstream_latency_seconds`` (Histogram)
* ``finance_api_upstream_errors_total`` (Counter)
* ``finance_api_upstream_http_status_total`` (Counter)

Helpers:

* :func:`observe_upstream_request` – context manager for one upstream call.
* ``get_*`` accessors returning the underlying collectors.

Design
------
Collectors are created against the *current* default registry
(:data:`prometheus_client.REGISTRY`). If a collector with the same name
already exists there, the existing instance is reused instead of registering
a duplicate, which keeps module re-imports safe.
"""

from __future__ import annotations

from collections.abc import Generator, Sequence
from contextlib import contextmanager, suppress
from dataclasses import dataclass, field
from time import perf_counter

import prometheus_client as prom
from prometheus_client import Counter, Histogram
from prometheus_client.registry import CollectorRegistry


def _get_or_create_histogram(
    name: str,
    doc: str,
    labelnames: Sequence[str] | None = None,
) -> Histogram:
    """Return a histogram bound to the current default registry.

    Args:
        name: Metric name.
        doc: Human-readable metric description.
        labelnames: Optional iterable of label names.

    Returns:
        A :class:`Histogram` bound to the current :data:`prom.REGISTRY`.
    """
    registry: CollectorRegistry = prom.REGISTRY
    mapping = getattr(registry, "_names_to_collectors", {})
    existing = mapping.get(name)
    if isinstance(existing, Histogram):
        return existing

    labels = tuple(labelnames) if labelnames is not None else ()
    try:
        return Histogram(name, doc, labels, registry=registry)
    except ValueError as exc:
        if "Duplicated timeseries" in str(exc):
            mapping = getattr(registry, "_names_to_collectors", {})
            again = mapping.get(name)
            if isinstance(again, Histogram):
                return again
        raise


def _get_or_create_counter(
    name: str,
    doc: str,
    labelnames: Sequence[str] | None = None,
) -> Counter:
    """Return a counter bound to the current default registry.

    Mirrors :func:`_get_or_create_histogram` for :class:`Counter` collectors.
    Note that ``prometheus_client`` registers counters under the name without
    the ``_total`` suffix.
    """
    registry: CollectorRegistry = prom.REGISTRY
    mapping = getattr(registry, "_names_to_collectors", {})
    existing = mapping.get(name) or mapping.get(name.removesuffix("_total"))
    if isinstance(existing, Counter):
        return existing

    labels = tuple(labelnames) if labelnames is not None else ()
    try:
        return Counter(name, doc, labels, registry=registry)
    except ValueError as exc:
        if "Duplicated timeseries" in str(exc):
            mapping = getattr(registry, "_names_to_collectors", {})
            again = mapping.get(name) or mapping.get(name.removesuffix("_total"))
            if isinstance(again, Counter):
                return again
        raise


upstream_latency_seconds: Histogram = _get_or_create_histogram(
    "finance_api_upstream_latency_seconds",
    "Latency of upstream provider calls (seconds).",
    labelnames=("provider", "endpoint", "outcome"),
)

upstream_errors_total: Counter = _get_or_create_counter(
    "finance_api_upstream_errors_total",
    "Total errors encountered when calling the upstream provider.",
    labelnames=("provider", "endpoint", "reason"),
)

upstream_http_status_total: Counter = _get_or_create_counter(
    "finance_api_upstream_http_status_total",
    "HTTP status codes returned by the upstream provider.",
    labelnames=("provider", "endpoint", "status_code"),
)


@dataclass
class UpstreamObservation:
    """State captured while observing an upstream call.

    Attributes:
        provider: Upstream provider identifier (for labelling).
        endpoint: Logical endpoint name (for labelling).
        start: Monotonic start time in seconds.
        outcome: Outcome of the call (``"success"`` or ``"error"``).
        error_reason: Short, machine-readable error reason if any.
    """

    provider: str
    endpoint: str
    start: float = field(default_factory=perf_counter)
    outcome: str = "success"
    error_reason: str | None = None

    @property
    def elapsed(self) -> float:
        """Seconds since the observation started."""
        return perf_counter() - self.start

    def mark_error(self, reason: str) -> None:
        """Mark the upstream call as failed with a given reason."""
        self.outcome = "error"
        self.error_reason = reason

    def record_status(self, status_code: int) -> None:
        """Count one HTTP status code for this call (best effort)."""
        with suppress(Exception):
            upstream_http_status_total.labels(
                provider=self.provider,
                endpoint=self.endpoint,
                status_code=str(status_code),
            ).inc()


@contextmanager
def observe_upstream_request(
    *,
    provider: str,
    endpoint: str,
) -> Generator[UpstreamObservation, None, None]:
    """Observe one upstream request.

    Records a latency sample in ``finance_api_upstream_latency_seconds`` and,
    when :meth:`UpstreamObservation.mark_error` was invoked or an exception
    escapes, an increment of ``finance_api_upstream_errors_total``.

    Args:
        provider: Upstream provider identifier (e.g. ``"yahoo"``).
        endpoint: Logical endpoint name (e.g. ``"quote"`` or ``"chart"``).

    Yields:
        A mutable :class:`UpstreamObservation`.
    """
    obs = UpstreamObservation(provider=provider, endpoint=endpoint)
    try:
        yield obs
    except Exception as exc:
        if obs.error_reason is None:
            obs.mark_error(type(exc).__name__)
        raise
    finally:
        elapsed = obs.elapsed

        with suppress(Exception):
            upstream_latency_seconds.labels(
                provider=obs.provider,
                endpoint=obs.endpoint,
                outcome=obs.outcome,
            ).observe(elapsed)

            if obs.error_reason is not None:
                upstream_errors_total.labels(
                    provider=obs.provider,
                    endpoint=obs.endpoint,
                    reason=obs.error_reason,
                ).inc()


def get_upstream_latency_seconds() -> Histogram:
    """Return the upstream latency histogram."""
    return upstream_latency_seconds


def get_upstream_errors_total() -> Counter:
    """Return the upstream errors counter."""
    return upstream_errors_total


def get_upstream_http_status_total() -> Counter:
    """Return the upstream HTTP status counter."""
    return upstream_http_status_total
