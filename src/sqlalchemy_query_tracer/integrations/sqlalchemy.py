"""SQLAlchemy integration — map cursor execution events onto a QueryHook.

``before_cursor_execute`` is reported as started, ``handle_error`` as failed
and ``after_cursor_execute`` as completed. Statements are correlated by the
identity of their execution context, falling back to the DBAPI cursor for
statements the dialect runs without one.

Only the ``qmark`` paramstyle uses a single-character placeholder; statements
from dialects with other paramstyles are traced without substitution.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.engine.interfaces import ExecuteStyle
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from sqlalchemy_query_tracer.events import QueryCompleted, QueryFailed, QueryStarted
from sqlalchemy_query_tracer.hooks import QueryHook

logger = logging.getLogger(__name__)


def is_sqlalchemy_source(source: Any) -> bool:
    return isinstance(source, (Engine, Connection, AsyncEngine, AsyncConnection))


def _sync_target(source: Engine | Connection | AsyncEngine | AsyncConnection) -> Any:
    if isinstance(source, AsyncEngine):
        return source.sync_engine
    if isinstance(source, AsyncConnection):
        return source.sync_connection
    return source


def _query_id(context: Any, cursor: Any) -> int:
    return id(context) if context is not None else id(cursor)


def _first_row(parameters: Any, context: Any) -> Any:
    # insertmanyvalues batches arrive as one flat tuple, not a list of rows
    if getattr(context, "execute_style", None) is ExecuteStyle.INSERTMANYVALUES:
        return parameters
    return parameters[0] if parameters else ()


def instrument_engine(
    source: Engine | Connection | AsyncEngine | AsyncConnection, hook: QueryHook
) -> None:
    """Register listeners on ``source`` that forward to ``hook``.

    ``handle_error`` can only be established on an engine, so for a single
    connection it is registered on the connection's engine and filtered to
    errors raised on that connection.
    """
    target = _sync_target(source)
    connection = target if isinstance(target, Connection) else None

    def _before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        try:
            if executemany:
                parameters = _first_row(parameters, context)
            hook.on_started(
                QueryStarted(
                    query_id=_query_id(context, cursor),
                    statement=statement,
                    parameters=parameters,
                )
            )
        except Exception:
            logger.warning("Failed to report started query", exc_info=True)

    def _handle_error(exception_context):
        try:
            if connection is not None and exception_context.connection is not connection:
                return
            context = exception_context.execution_context
            cursor = None
            if context is None:
                cursor = getattr(exception_context, "cursor", None)
            hook.on_failed(
                QueryFailed(
                    query_id=_query_id(context, cursor),
                    error=exception_context.original_exception,
                )
            )
        except Exception:
            logger.warning("Failed to report failed query", exc_info=True)

    def _after_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        try:
            hook.on_completed(
                QueryCompleted(query_id=_query_id(context, cursor), response=cursor)
            )
        except Exception:
            logger.warning("Failed to report completed query", exc_info=True)

    event.listen(target, "before_cursor_execute", _before_cursor_execute)
    event.listen(
        connection.engine if connection is not None else target,
        "handle_error",
        _handle_error,
    )
    event.listen(target, "after_cursor_execute", _after_cursor_execute)
    logger.debug("Instrumented %s for query tracing", type(target).__name__)
