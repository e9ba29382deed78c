# src/finance_api/application/schemas/dto/base.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Base DTO (Application Layer).

Purpose:
    Canonical Pydantic bases for application-layer parameter objects.
    Transport-agnostic.

Layer: application/schemas/dto
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseDTO(BaseModel):
    """Base class for caller-facing parameter objects.

    Notes:
        - Immutable: a params value can be reused across any number of calls.
        - Strict fields (``extra='forbid'``).
    """

    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        str_strip_whitespace=True,
        frozen=True,
    )


class WireForm(BaseModel):
    """Base class for query-string forms.

    Field names are snake_case; the wire key is the camelCase alias read by
    :func:`finance_api.application.form.encode`.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )
