"""Output sinks. A sink is called as ``sink(template, *args)``."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy_query_tracer._types import Sink

QUERY_LOGGER_NAME = "sqlalchemy_query_tracer.queries"


def print_sink(template: str, *args: Any) -> None:
    """Default sink: printf-style substitution, written to stdout."""
    print(template % args if args else template)


def logger_sink(
    logger: logging.Logger | None = None, level: int = logging.DEBUG
) -> Sink:
    """Return a sink that forwards trace lines to a stdlib logger.

    Substitution is left to logging, so nothing is formatted when the level
    is disabled.
    """
    target = logger or logging.getLogger(QUERY_LOGGER_NAME)

    def sink(template: str, *args: Any) -> None:
        target.log(level, template, *args)

    return sink
