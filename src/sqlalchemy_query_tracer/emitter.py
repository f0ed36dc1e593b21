"""QueryEventEmitter — in-process synchronous source of lifecycle events."""

from __future__ import annotations

from sqlalchemy_query_tracer._types import Handler
from sqlalchemy_query_tracer.events import QueryEvent
from sqlalchemy_query_tracer.exceptions import TracerConfigurationError
from sqlalchemy_query_tracer.hooks import QueryHook


def _coerce_event(event: QueryEvent | str) -> QueryEvent:
    if isinstance(event, QueryEvent):
        return event
    try:
        return QueryEvent(event)
    except ValueError:
        raise TracerConfigurationError(
            f"Unknown query event {event!r}", option="event"
        ) from None


class QueryEventEmitter:
    """Ordered handler registry for the three query lifecycle events.

    Registration methods return the emitter so calls can be chained::

        emitter.on("started", a).on("completed", b)
    """

    def __init__(self) -> None:
        self._handlers: dict[QueryEvent, list[Handler]] = {
            event: [] for event in QueryEvent
        }

    def on(self, event: QueryEvent | str, handler: Handler) -> QueryEventEmitter:
        self._handlers[_coerce_event(event)].append(handler)
        return self

    def off(self, event: QueryEvent | str, handler: Handler) -> QueryEventEmitter:
        handlers = self._handlers[_coerce_event(event)]
        if handler in handlers:
            handlers.remove(handler)
        return self

    def add_hook(self, hook: QueryHook) -> QueryEventEmitter:
        return (
            self.on(QueryEvent.STARTED, hook.on_started)
            .on(QueryEvent.FAILED, hook.on_failed)
            .on(QueryEvent.COMPLETED, hook.on_completed)
        )

    def emit(self, event: QueryEvent | str, payload: object) -> None:
        # Snapshot so a handler may unregister itself mid-dispatch
        for handler in tuple(self._handlers[_coerce_event(event)]):
            handler(payload)

    def listener_count(self, event: QueryEvent | str) -> int:
        return len(self._handlers[_coerce_event(event)])
