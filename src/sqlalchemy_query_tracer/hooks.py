"""QueryHook base and convenience hook classes."""

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy_query_tracer.events import QueryCompleted, QueryFailed, QueryStarted


class QueryHook:
    """Base abstraction for lifecycle listeners. All methods are no-op by default."""

    def on_started(self, event: QueryStarted) -> None:
        pass

    def on_failed(self, event: QueryFailed) -> None:
        pass

    def on_completed(self, event: QueryCompleted) -> None:
        pass


class OnStarted(QueryHook):
    """Convenience hook that only fires when a statement starts."""

    def __init__(self, callback: Callable[[QueryStarted], None]) -> None:
        self._callback = callback

    def on_started(self, event: QueryStarted) -> None:
        self._callback(event)


class OnFailed(QueryHook):
    """Convenience hook that only fires when a statement fails."""

    def __init__(self, callback: Callable[[QueryFailed], None]) -> None:
        self._callback = callback

    def on_failed(self, event: QueryFailed) -> None:
        self._callback(event)


class OnCompleted(QueryHook):
    """Convenience hook that only fires when a statement completes."""

    def __init__(self, callback: Callable[[QueryCompleted], None]) -> None:
        self._callback = callback

    def on_completed(self, event: QueryCompleted) -> None:
        self._callback(event)
