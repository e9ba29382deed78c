"""Domain enum exports."""

from __future__ import annotations

from .market import Interval, MarketState, QuoteType

__all__ = ["Interval", "MarketState", "QuoteType"]
