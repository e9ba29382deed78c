"""
Config package export.

Keeps import sites clean and stable:
    from finance_api.config import get_settings, FinanceSettings
"""

from __future__ import annotations

from .settings import FinanceSettings, get_settings

__all__ = ["FinanceSettings", "get_settings"]
