# src/finance_api/domain/entities/base.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Base Entities (Domain Layer).

Purpose:
    * :class:`BaseEntity` — mixin for immutable entities built by the library
      itself (frozen dataclass semantics plus an invariant hook).
    * :class:`ProviderModel` — Pydantic base for records decoded straight from
      provider JSON. Field names are snake_case; provider camelCase keys are
      accepted through generated aliases and unknown keys are ignored, since
      the provider adds fields without notice.

Layer:
    domain/entities
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


@dataclass(frozen=True, slots=True)
class BaseEntity:
    """Base mixin for domain entities.

    ``BaseEntity`` declares no fields; concrete entities subclass it and
    declare their own fields and invariants in :meth:`__post_init__`.
    """

    def __post_init__(self) -> None:  # noqa: D401
        """Hook for subclasses to extend with invariant checks."""
        return


class ProviderModel(BaseModel):
    """Base class for provider-decoded records.

    Notes:
        - Immutable once decoded.
        - ``extra='ignore'``: unknown provider keys are dropped silently.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )
