# tests/unit/infrastructure/logging/test_logger.py
from __future__ import annotations

import json
import logging
import sys
from collections.abc import Callable
from typing import Any

import pytest

from finance_api.adapters.clients import quote
from finance_api.domain.exceptions import TransportError
from finance_api.infrastructure.logging.logger import (
    LogLevel,
    _JsonFormatter,
    configure_library_logging,
    get_json_logger,
    get_log_level,
    set_log_level,
    set_logger,
)


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture
def sink() -> tuple[logging.Logger, _ListHandler]:
    handler = _ListHandler()
    log = logging.getLogger("tests.finance.sink")
    log.handlers = [handler]
    log.setLevel(logging.DEBUG)
    log.propagate = False
    return log, handler


def test_silent_level_forwards_nothing(sink: tuple[logging.Logger, _ListHandler]) -> None:
    log, handler = sink
    set_logger(log)
    set_log_level(LogLevel.SILENT)

    get_json_logger("finance_api.test").error("finance.test.error")

    assert handler.records == []


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        (LogLevel.ERRORS, ["finance.test.error"]),
        (LogLevel.INFO, ["finance.test.info", "finance.test.error"]),
        (LogLevel.DEBUG, ["finance.test.debug", "finance.test.info", "finance.test.error"]),
    ],
)
def test_levels_gate_records(
    sink: tuple[logging.Logger, _ListHandler], level: LogLevel, expected: list[str]
) -> None:
    log, handler = sink
    set_logger(log)
    set_log_level(level)

    lg = get_json_logger("finance_api.test")
    lg.debug("finance.test.debug")
    lg.info("finance.test.info")
    lg.error("finance.test.error")

    assert [r.getMessage() for r in handler.records] == expected


def test_failed_query_is_logged_at_error_level(
    sink: tuple[logging.Logger, _ListHandler], make_backend: Callable[..., Any]
) -> None:
    log, handler = sink
    set_logger(log)
    set_log_level("errors")

    it = quote.Client(make_backend(error=TransportError("refused"))).list(["AAPL"])

    assert it.err is not None
    assert handler.records
    assert all(r.levelno >= logging.ERROR for r in handler.records)


def test_level_names_and_integers_are_accepted() -> None:
    set_log_level("debug")
    assert get_log_level() is LogLevel.DEBUG

    set_log_level(1)
    assert get_log_level() is LogLevel.ERRORS


def test_unknown_level_name_is_rejected() -> None:
    with pytest.raises(ValueError):
        set_log_level("verbose")


def test_library_logging_follows_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FINANCE_LOG_LEVEL", "info")

    configure_library_logging()

    assert get_log_level() is LogLevel.INFO


def test_json_formatter_emits_stable_keys_and_extras() -> None:
    record = logging.LogRecord(
        name="finance_api.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="finance.request",
        args=(),
        exc_info=None,
    )
    record.extra = {"endpoint": "quote", "status": 200}

    payload = json.loads(_JsonFormatter().format(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "finance_api.test"
    assert payload["message"] == "finance.request"
    assert payload["endpoint"] == "quote"
    assert payload["status"] == 200
    assert "ts" in payload


def test_json_formatter_includes_exception_details() -> None:
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        exc_info = sys.exc_info()

    record = logging.LogRecord(
        name="finance_api.test",
        level=logging.ERROR,
        pathname=__file__,
        lineno=1,
        msg="failed",
        args=(),
        exc_info=exc_info,
    )

    payload = json.loads(_JsonFormatter().format(record))

    assert payload["exc_type"] == "RuntimeError"
    assert payload["exc_message"] == "boom"
