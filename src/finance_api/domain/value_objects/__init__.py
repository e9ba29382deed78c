"""Domain value object exports."""

from __future__ import annotations

from .value_objects import Datetime, RequestContext

__all__ = ["Datetime", "RequestContext"]
