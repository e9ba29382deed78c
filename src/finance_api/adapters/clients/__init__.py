"""Per-domain client façades.

Each module exposes module-level convenience functions bound to the registered
backend, plus a ``Client`` class accepting an explicit backend.
"""

from __future__ import annotations

from . import chart, crypto, equity, etf, forex, future, index, mutualfund, options, quote

__all__ = [
    "chart",
    "crypto",
    "equity",
    "etf",
    "forex",
    "future",
    "index",
    "mutualfund",
    "options",
    "quote",
]
