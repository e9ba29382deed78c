"""Application DTOs."""

from __future__ import annotations

from .base import BaseDTO, WireForm
from .params import ChartForm, ChartParams, ListParams, OptionsForm, OptionsParams, QuoteForm

__all__ = [
    "BaseDTO",
    "ChartForm",
    "ChartParams",
    "ListParams",
    "OptionsForm",
    "OptionsParams",
    "QuoteForm",
    "WireForm",
]
