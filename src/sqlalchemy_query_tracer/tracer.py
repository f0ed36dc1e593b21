"""QueryTracer — correlates lifecycle events into one timed line per statement."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import replace
from typing import Any, TypeVar

from sqlalchemy_query_tracer._types import Clock, QueryId
from sqlalchemy_query_tracer.events import (
    QueryCompleted,
    QueryEvent,
    QueryFailed,
    QueryStarted,
)
from sqlalchemy_query_tracer.exceptions import UnsupportedSourceError
from sqlalchemy_query_tracer.hooks import QueryHook
from sqlalchemy_query_tracer.integrations.sqlalchemy import (
    instrument_engine,
    is_sqlalchemy_source,
)
from sqlalchemy_query_tracer.options import TracerOptions
from sqlalchemy_query_tracer.record import CompletedQuery, PendingQuery
from sqlalchemy_query_tracer.render import (
    LABEL_COLOR,
    STATEMENT_COLOR,
    format_label,
    paint,
    positional_parameters,
    render_statement,
)

logger = logging.getLogger(__name__)

SourceT = TypeVar("SourceT")


class QueryTracer(QueryHook):
    """Tracks in-flight statements and emits a line when each completes.

    None of the ``on_*`` handlers raise: they run inline on the statement
    execution path of the source.
    """

    def __init__(
        self,
        options: TracerOptions | None = None,
        *,
        clock: Clock = time.perf_counter_ns,
    ) -> None:
        self.options = options or TracerOptions()
        self._clock = clock
        self._pending: dict[QueryId, PendingQuery] = {}
        self._lock = threading.Lock()

    @property
    def pending_count(self) -> int:
        with self._lock:
            return len(self._pending)

    def on_started(self, event: QueryStarted) -> None:
        try:
            record = PendingQuery(
                statement=event.statement,
                parameters=positional_parameters(event.parameters),
                start_ns=self._clock(),
            )
            with self._lock:
                self._pending[event.query_id] = record
        except Exception:
            logger.warning("Failed to track started query", exc_info=True)

    def on_failed(self, event: QueryFailed) -> None:
        try:
            with self._lock:
                record = self._pending.pop(event.query_id, None)
        except Exception:
            logger.warning("Failed to discard failed query", exc_info=True)
            return
        if record is None:
            logger.debug("Failure for untracked query %r ignored", event.query_id)

    def on_completed(self, event: QueryCompleted) -> None:
        try:
            now_ns = self._clock()
            with self._lock:
                record = self._pending.pop(event.query_id, None)
            if record is None:
                logger.debug(
                    "Completion for untracked query %r skipped", event.query_id
                )
                return
            completed = CompletedQuery(
                statement=render_statement(
                    record.statement, record.parameters, self.options.placeholder
                ),
                duration_ms=record.elapsed_ms(now_ns),
            )
        except Exception:
            logger.warning("Failed to render completed query", exc_info=True)
            return
        self._dispatch(completed)

    def _dispatch(self, completed: CompletedQuery) -> None:
        try:
            label = format_label(completed.duration_ms, self.options.precision)
            statement = completed.statement
            if self.options.colors:
                label = paint(label, LABEL_COLOR)
                statement = paint(statement, STATEMENT_COLOR)
            self.options.sink("%s %s", label, statement)
        except Exception:
            logger.warning("Query trace sink raised", exc_info=True)


def attach(
    source: SourceT,
    options: TracerOptions | None = None,
    *,
    clock: Clock = time.perf_counter_ns,
    **overrides: Any,
) -> SourceT:
    """Attach a fresh QueryTracer to ``source`` and return ``source``.

    ``source`` may be an SQLAlchemy ``Engine``, ``AsyncEngine`` or
    ``Connection``, or any emitter exposing ``on(event_name, handler)``.
    Keyword overrides (``sink``, ``placeholder``, ``colors``, ``precision``)
    build a TracerOptions when ``options`` is not given.
    """
    if options is None:
        options = TracerOptions(**overrides)
    elif overrides:
        options = replace(options, **overrides)
    tracer = QueryTracer(options, clock=clock)
    install(source, tracer)
    return source


def install(source: Any, hook: QueryHook) -> None:
    """Wire a hook's handlers to a supported event source."""
    if is_sqlalchemy_source(source):
        instrument_engine(source, hook)
    elif callable(getattr(source, "on", None)):
        source.on(QueryEvent.STARTED.value, hook.on_started)
        source.on(QueryEvent.FAILED.value, hook.on_failed)
        source.on(QueryEvent.COMPLETED.value, hook.on_completed)
    else:
        raise UnsupportedSourceError(source)
    logger.debug("Attached %s to %s", type(hook).__name__, type(source).__name__)
