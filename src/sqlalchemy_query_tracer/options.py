"""TracerOptions — validated tracer configuration."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy_query_tracer._types import Sink
from sqlalchemy_query_tracer.exceptions import TracerConfigurationError
from sqlalchemy_query_tracer.render import DEFAULT_PLACEHOLDER
from sqlalchemy_query_tracer.sinks import print_sink


@dataclass(frozen=True)
class TracerOptions:
    """Configuration for a single QueryTracer."""

    sink: Sink = print_sink
    placeholder: str = DEFAULT_PLACEHOLDER
    colors: bool = False
    precision: int = 3

    def __post_init__(self) -> None:
        if not callable(self.sink):
            raise TracerConfigurationError("sink must be callable", option="sink")
        if not isinstance(self.placeholder, str) or len(self.placeholder) != 1:
            raise TracerConfigurationError(
                "placeholder must be a single character", option="placeholder"
            )
        if (
            isinstance(self.precision, bool)
            or not isinstance(self.precision, int)
            or self.precision < 0
        ):
            raise TracerConfigurationError(
                "precision must be a non-negative integer", option="precision"
            )
