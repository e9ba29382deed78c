# src/finance_api/infrastructure/logging/logger.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Structured JSON logging utilities.

This module owns the library's logging surface:

* an idempotent root configurator and a JSON formatter for applications that
  want the library's records rendered as JSON lines;
* a package-wide verbosity switch (:class:`LogLevel`) applied to the
  ``finance_api`` logger hierarchy;
* an injectable sink (:func:`set_logger`) that forwards every library record
  to a caller-supplied :class:`logging.Logger`.

The library never installs output handlers by default; records go nowhere
unless the caller configures logging.

Typical usage:
    set_log_level(LogLevel.INFO)
    configure_root_logging()
    log = get_json_logger(__name__)
"""

from __future__ import annotations

import json
import logging
import os
from datetime import UTC, datetime
from enum import IntEnum
from typing import Any

__all__ = [
    "LogLevel",
    "configure_library_logging",
    "configure_root_logging",
    "get_json_logger",
    "get_log_level",
    "set_log_level",
    "set_logger",
]

PACKAGE_LOGGER_NAME = "finance_api"


class LogLevel(IntEnum):
    """Package verbosity.

    Attributes:
        SILENT: No records are emitted.
        ERRORS: Failed requests and undecodable responses.
        INFO: Errors plus one line per upstream request.
        DEBUG: Everything, including timings and response bodies.
    """

    SILENT = 0
    ERRORS = 1
    INFO = 2
    DEBUG = 3


_STDLIB_LEVELS: dict[LogLevel, int] = {
    LogLevel.SILENT: logging.CRITICAL + 10,
    LogLevel.ERRORS: logging.ERROR,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
}

_package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
_package_logger.addHandler(logging.NullHandler())
_package_logger.setLevel(_STDLIB_LEVELS[LogLevel.SILENT])

_current_level: LogLevel = LogLevel.SILENT
_sink_handler: logging.Handler | None = None


class _JsonFormatter(logging.Formatter):
    """JSON log formatter emitting stable keys and optional extras."""

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as a JSON object.

        Args:
            record: Logging record.

        Returns:
            JSON-encoded log line.
        """
        ts = datetime.now(tz=UTC).isoformat()
        payload: dict[str, Any] = {
            "ts": ts,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Exceptions: guard against None in exc_info tuple.
        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            if exc_type is not None:
                payload["exc_type"] = exc_type.__name__
            if exc_value is not None:
                payload["exc_message"] = str(exc_value)

        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)

        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=str)


class _ForwardingHandler(logging.Handler):
    """Hand library records to an injected sink logger."""

    def __init__(self, sink: logging.Logger) -> None:
        super().__init__(level=logging.NOTSET)
        self.sink = sink

    def emit(self, record: logging.LogRecord) -> None:
        self.sink.handle(record)


def _coerce_level(level: LogLevel | int | str) -> LogLevel:
    """Normalize a level given as enum, integer (0-3) or name."""
    if isinstance(level, LogLevel):
        return level
    if isinstance(level, str):
        try:
            return LogLevel[level.strip().upper()]
        except KeyError as exc:
            raise ValueError(f"unknown log level: {level!r}") from exc
    return LogLevel(int(level))


def set_log_level(level: LogLevel | int | str) -> None:
    """Set the package-wide verbosity.

    Args:
        level: A :class:`LogLevel`, its integer value, or its name
            (``"silent"``, ``"errors"``, ``"info"``, ``"debug"``).

    Raises:
        ValueError: If the level cannot be resolved.
    """
    global _current_level
    resolved = _coerce_level(level)
    _current_level = resolved
    _package_logger.setLevel(_STDLIB_LEVELS[resolved])


def get_log_level() -> LogLevel:
    """Return the current package-wide verbosity."""
    return _current_level


def set_logger(sink: logging.Logger | None) -> None:
    """Route every library record to ``sink`` (``None`` removes the sink).

    Records are still gated by :func:`set_log_level` before they reach the sink.
    """
    global _sink_handler
    if _sink_handler is not None:
        _package_logger.removeHandler(_sink_handler)
        _sink_handler = None
    if sink is not None:
        _sink_handler = _ForwardingHandler(sink)
        _package_logger.addHandler(_sink_handler)


def configure_library_logging(level: LogLevel | int | str | None = None) -> None:
    """Apply the configured verbosity (``FINANCE_LOG_LEVEL``) to the package logger.

    Args:
        level: Explicit level. If ``None``, use the value from settings.
    """
    if level is None:
        from finance_api.config.settings import get_settings

        level = get_settings().log_level
    set_log_level(level)


def configure_root_logging(level: str | int | None = None) -> None:
    """Initialize the root logger with a JSON stream handler (idempotent).

    Args:
        level: Logging level or level name. If ``None``, use env ``LOG_LEVEL`` or ``INFO``.
    """
    root = logging.getLogger()

    env_level = os.getenv("LOG_LEVEL")
    resolved: int | str = (
        level if level is not None else (env_level.upper() if env_level else "INFO")
    )
    root.setLevel(resolved)

    if root.handlers:
        # Already configured; prevent duplicate handlers.
        return

    handler = logging.StreamHandler()
    handler.setFormatter(_JsonFormatter())
    root.addHandler(handler)


def get_json_logger(name: str) -> logging.Logger:
    """Return a module-specific logger.

    Library modules pass ``__name__`` so their loggers sit below the
    ``finance_api`` package logger and inherit its verbosity and sink.

    Args:
        name: Logger name, typically ``__name__`` of the caller.

    Returns:
        Configured logger.
    """
    logger = logging.getLogger(name)
    logger.propagate = True
    return logger
