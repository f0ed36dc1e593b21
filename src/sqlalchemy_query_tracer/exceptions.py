"""QueryTracerError hierarchy for construction-time failures."""

from __future__ import annotations

from typing import Any


class QueryTracerError(Exception):
    """Base for all tracer exceptions."""


class TracerConfigurationError(QueryTracerError):
    """An option passed to attach() or TracerOptions is invalid."""

    def __init__(self, detail: str, *, option: str | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.option = option


class UnsupportedSourceError(QueryTracerError):
    """attach() was given something that emits no query lifecycle events."""

    def __init__(self, source: Any) -> None:
        detail = f"Cannot attach a query tracer to {type(source).__name__!r}"
        super().__init__(detail)
        self.detail = detail
        self.source = source
