"""Shared pytest fixtures for sqlalchemy-query-tracer tests."""

from __future__ import annotations

from typing import Any

import pytest

from sqlalchemy_query_tracer.options import TracerOptions
from sqlalchemy_query_tracer.tracer import QueryTracer


class CapturingSink:
    """Sink that records every (template, args) call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def __call__(self, template: str, *args: Any) -> None:
        self.calls.append((template, args))

    @property
    def lines(self) -> list[str]:
        return [template % args for template, args in self.calls]


class FakeClock:
    """Manually advanced nanosecond clock."""

    def __init__(self, start_ns: int = 1_000_000) -> None:
        self.now_ns = start_ns

    def __call__(self) -> int:
        return self.now_ns

    def advance_ms(self, ms: float) -> None:
        self.now_ns += int(ms * 1_000_000)


@pytest.fixture
def sink() -> CapturingSink:
    return CapturingSink()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_tracer(sink: CapturingSink, clock: FakeClock) -> Any:
    """Factory for tracers wired to the capturing sink and fake clock."""

    def _make(**overrides: Any) -> QueryTracer:
        options = TracerOptions(sink=overrides.pop("sink", sink), **overrides)
        return QueryTracer(options, clock=clock)

    return _make
