"""Observability: Prometheus collectors for upstream calls."""
