"""Tests for QueryHook, OnStarted, OnFailed, OnCompleted."""

from __future__ import annotations

from unittest.mock import Mock

from sqlalchemy_query_tracer.emitter import QueryEventEmitter
from sqlalchemy_query_tracer.events import (
    QueryCompleted,
    QueryEvent,
    QueryFailed,
    QueryStarted,
)
from sqlalchemy_query_tracer.hooks import OnCompleted, OnFailed, OnStarted, QueryHook


class TestQueryHookBase:
    def test_default_methods_are_noop(self) -> None:
        class MinimalHook(QueryHook):
            pass

        hook = MinimalHook()
        hook.on_started(QueryStarted(1, "SELECT 1"))
        hook.on_failed(QueryFailed(1))
        hook.on_completed(QueryCompleted(1))


class TestConvenienceHooks:
    def test_on_started_only_fires_on_start(self) -> None:
        callback = Mock()
        hook = OnStarted(callback)
        started = QueryStarted(1, "SELECT 1")
        hook.on_started(started)
        hook.on_failed(QueryFailed(1))
        hook.on_completed(QueryCompleted(1))
        callback.assert_called_once_with(started)

    def test_on_failed_receives_error(self) -> None:
        errors: list[BaseException | None] = []
        hook = OnFailed(lambda event: errors.append(event.error))
        error = RuntimeError("boom")
        hook.on_failed(QueryFailed(1, error))
        assert errors == [error]

    def test_on_completed_via_emitter(self) -> None:
        callback = Mock()
        emitter = QueryEventEmitter().add_hook(OnCompleted(callback))
        emitter.emit("started", QueryStarted(1, "SELECT 1"))
        emitter.emit("completed", QueryCompleted(1, response="rows"))
        callback.assert_called_once_with(QueryCompleted(1, response="rows"))

    def test_add_hook_registers_all_events(self) -> None:
        emitter = QueryEventEmitter().add_hook(QueryHook())
        assert all(emitter.listener_count(event) == 1 for event in QueryEvent)


class TestQueryEvent:
    def test_values(self) -> None:
        assert [e.value for e in QueryEvent] == ["started", "failed", "completed"]
