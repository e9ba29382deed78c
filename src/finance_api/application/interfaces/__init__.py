"""Application ports."""

from __future__ import annotations

from .backend import Backend

__all__ = ["Backend"]
