# src/finance_api/config/settings.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Finance API Configuration (Pydantic Settings, v2)

Summary:
    Typed configuration for the provider backend. Values come from keyword
    arguments or ``FINANCE_*`` environment variables; nothing is required, so
    the library works with zero configuration.

Design:
    - Pydantic v2 BaseSettings with an env prefix.
    - Explicit field declarations with constrained ranges.
    - Singleton accessor `get_settings()` with LRU cache.

Environment variables (with ``model_config.env_prefix``):

* ``FINANCE_BASE_URL``
* ``FINANCE_COOKIE_URL``
* ``FINANCE_CRUMB_URL``
* ``FINANCE_TIMEOUT_S``
* ``FINANCE_USER_AGENT``
* ``FINANCE_REGION``
* ``FINANCE_CORS_DOMAIN``
* ``FINANCE_LOG_LEVEL`` (``silent`` / ``errors`` / ``info`` / ``debug``)
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://query1.finance.yahoo.com"
DEFAULT_COOKIE_URL = "https://login.yahoo.com"
DEFAULT_CRUMB_URL = DEFAULT_BASE_URL + "/v1/test/getcrumb"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:109.0) Gecko/20100101 Firefox/113.0"
)


class FinanceSettings(BaseSettings):
    """Configuration for the Yahoo Finance backend."""

    base_url: str = Field(
        DEFAULT_BASE_URL,
        description="Base URL of the quote/chart/options API host.",
    )
    cookie_url: str = Field(
        DEFAULT_COOKIE_URL,
        description="URL that hands out session cookies.",
    )
    crumb_url: str = Field(
        DEFAULT_CRUMB_URL,
        description="URL that exchanges session cookies for a crumb token.",
    )
    timeout_s: float = Field(
        80.0,
        gt=0,
        le=600.0,
        description="Default per-request timeout in seconds.",
    )
    user_agent: str = Field(
        DEFAULT_USER_AGENT,
        description="User-Agent header sent with every request.",
    )
    region: str = Field(
        "US",
        description="Fixed ``region`` query parameter for chart requests.",
    )
    cors_domain: str = Field(
        "com.finance.yahoo",
        description="Fixed ``corsDomain`` query parameter for chart requests.",
    )
    log_level: Literal["silent", "errors", "info", "debug"] = Field(
        "silent",
        description="Package-wide log verbosity.",
    )

    model_config: SettingsConfigDict = SettingsConfigDict(
        env_prefix="FINANCE_",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> FinanceSettings:
    """Return the process-wide settings (cached).

    Tests that change the environment call ``get_settings.cache_clear()``.
    """
    return FinanceSettings()
