# tests/conftest.py
from __future__ import annotations

import json
from collections.abc import Callable, Generator, Mapping, Sequence
from typing import Any

import pytest

from finance_api.config.settings import get_settings
from finance_api.dependencies.backends import reset_backends
from finance_api.domain.value_objects import RequestContext
from finance_api.infrastructure.logging import LogLevel, set_log_level, set_logger


class StubBackend:
    """Call-counting backend that answers every call with one fixed body."""

    def __init__(
        self,
        body: bytes | Mapping[str, Any] = b"{}",
        *,
        error: Exception | None = None,
    ) -> None:
        self.body = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
        self.error = error
        self.calls: list[tuple[str, tuple[tuple[str, str], ...], RequestContext | None]] = []

    def call(
        self,
        path: str,
        params: Sequence[tuple[str, str]],
        context: RequestContext | None = None,
    ) -> bytes:
        self.calls.append((path, tuple(params), context))
        if self.error is not None:
            raise self.error
        return self.body

    @property
    def call_count(self) -> int:
        return len(self.calls)

    @property
    def last_path(self) -> str:
        return self.calls[-1][0]

    @property
    def last_params(self) -> dict[str, str]:
        return dict(self.calls[-1][1])


@pytest.fixture(autouse=True)
def _isolate_library_state() -> Generator[None, None, None]:
    """Reset cached settings, the backend registry and logging between tests."""
    get_settings.cache_clear()
    reset_backends()
    set_log_level(LogLevel.SILENT)
    set_logger(None)
    yield
    get_settings.cache_clear()
    reset_backends()
    set_log_level(LogLevel.SILENT)
    set_logger(None)


@pytest.fixture
def make_backend() -> Callable[..., StubBackend]:
    """Factory for :class:`StubBackend` instances."""
    return StubBackend
