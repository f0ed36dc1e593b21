"""QueryEvent enum and the payloads carried by each lifecycle event."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from sqlalchemy_query_tracer._types import ParamValue, QueryId


class QueryEvent(Enum):
    """Statement lifecycle events, in the order a source fires them."""

    STARTED = "started"
    FAILED = "failed"
    COMPLETED = "completed"


@dataclass(frozen=True)
class QueryStarted:
    """Fired before the statement is sent to the database."""

    query_id: QueryId
    statement: str
    parameters: Sequence[ParamValue] = field(default_factory=tuple)


@dataclass(frozen=True)
class QueryFailed:
    """Fired when execution raised."""

    query_id: QueryId
    error: BaseException | None = None


@dataclass(frozen=True)
class QueryCompleted:
    """Fired when execution returned successfully."""

    query_id: QueryId
    response: Any = None
