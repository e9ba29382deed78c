"""Domain exception exports."""

from __future__ import annotations

from .base import DomainError
from .finance import (
    ArgumentError,
    ChartTimeError,
    FinanceError,
    RemoteError,
    TransportError,
)

__all__ = [
    "ArgumentError",
    "ChartTimeError",
    "DomainError",
    "FinanceError",
    "RemoteError",
    "TransportError",
]
