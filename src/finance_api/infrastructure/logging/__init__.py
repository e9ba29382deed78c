"""Logging exports."""

from __future__ import annotations

from .logger import (
    LogLevel,
    configure_library_logging,
    configure_root_logging,
    get_json_logger,
    get_log_level,
    set_log_level,
    set_logger,
)

__all__ = [
    "LogLevel",
    "configure_library_logging",
    "configure_root_logging",
    "get_json_logger",
    "get_log_level",
    "set_log_level",
    "set_logger",
]
