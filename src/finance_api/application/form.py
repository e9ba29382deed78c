# src/finance_api/application/form.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Query-string form encoding.

Summary:
    Turns a typed request-form model into an ordered list of string key/value
    pairs suitable for a URL query string.

Rules:
    * Keys come from the model's field aliases (camelCase on the wire).
    * Zero values are omitted: ``None``, empty strings and collections,
      ``False`` and numeric zero. Sentinels such as ``-1`` are sent.
    * Booleans are rendered lowercase, enums by value, sequences comma-joined.

Layer:
    application
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any

from pydantic import BaseModel

__all__ = ["Values", "encode", "format_value"]


class Values:
    """Ordered, multi-valued query parameters.

    Insertion order is preserved so the encoded query string is deterministic.
    """

    __slots__ = ("_pairs",)

    def __init__(self, pairs: Iterable[tuple[str, str]] | None = None) -> None:
        self._pairs: list[tuple[str, str]] = list(pairs or ())

    def add(self, key: str, value: str) -> None:
        """Append a pair, keeping any existing values for ``key``."""
        self._pairs.append((key, value))

    def to_list(self) -> list[tuple[str, str]]:
        """Return a copy of the pairs in insertion order."""
        return list(self._pairs)

    def __repr__(self) -> str:
        return f"Values({self._pairs!r})"


def _is_zero(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, bytes, list, tuple, dict, set, frozenset)):
        return len(value) == 0
    if isinstance(value, (bool, int, float)):
        return not value
    return False


def format_value(value: Any) -> str:
    """Render one field value as a query-string token.

    Args:
        value: Scalar, enum or sequence of those.

    Returns:
        str: The wire representation.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple)):
        return ",".join(format_value(v) for v in value)
    return str(value)


def encode(model: BaseModel) -> Values:
    """Encode a request-form model into query pairs.

    Args:
        model: Pydantic model whose fields describe the wire parameters.

    Returns:
        Values: The populated pairs in field order.
    """
    values = Values()
    for name, info in type(model).model_fields.items():
        raw = getattr(model, name)
        if _is_zero(raw):
            continue
        key = info.serialization_alias or info.alias or name
        values.add(key, format_value(raw))
    return values
