# src/finance_api/infrastructure/external_apis/yahoo/__init__.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Yahoo Finance external API package.

Purpose:
    Group Yahoo-related infrastructure modules:

    * client: Blocking HTTP backends (plain and crumb-authenticated).
    * session: Cookie/crumb session with lock-guarded refresh.
    * types: Typed fragments of the provider's JSON envelopes.
"""

from __future__ import annotations
