"""PendingQuery and CompletedQuery — in-flight and finished statement records."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from sqlalchemy_query_tracer._types import ParamValue


@dataclass(frozen=True)
class PendingQuery:
    """State held for a statement between its start and terminal event."""

    statement: str
    parameters: Sequence[ParamValue]
    start_ns: int

    def elapsed_ms(self, now_ns: int) -> float:
        """Fractional milliseconds since start, never negative."""
        return max(now_ns - self.start_ns, 0) / 1e6


@dataclass(frozen=True)
class CompletedQuery:
    """A finished statement, ready to be handed to a sink."""

    statement: str
    duration_ms: float
