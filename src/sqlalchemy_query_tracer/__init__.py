"""SQLAlchemy Query Tracer - one timed, parameter-inlined log line per SQL statement."""

import logging

from sqlalchemy_query_tracer.emitter import QueryEventEmitter
from sqlalchemy_query_tracer.events import (
    QueryCompleted,
    QueryEvent,
    QueryFailed,
    QueryStarted,
)
from sqlalchemy_query_tracer.exceptions import (
    QueryTracerError,
    TracerConfigurationError,
    UnsupportedSourceError,
)
from sqlalchemy_query_tracer.hooks import OnCompleted, OnFailed, OnStarted, QueryHook
from sqlalchemy_query_tracer.integrations.sqlalchemy import instrument_engine
from sqlalchemy_query_tracer.options import TracerOptions
from sqlalchemy_query_tracer.record import CompletedQuery, PendingQuery
from sqlalchemy_query_tracer.render import render_parameter, render_statement
from sqlalchemy_query_tracer.sinks import logger_sink, print_sink
from sqlalchemy_query_tracer.tracer import QueryTracer, attach, install

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CompletedQuery",
    "OnCompleted",
    "OnFailed",
    "OnStarted",
    "PendingQuery",
    "QueryCompleted",
    "QueryEvent",
    "QueryEventEmitter",
    "QueryFailed",
    "QueryHook",
    "QueryStarted",
    "QueryTracer",
    "QueryTracerError",
    "TracerConfigurationError",
    "TracerOptions",
    "UnsupportedSourceError",
    "attach",
    "install",
    "instrument_engine",
    "logger_sink",
    "print_sink",
    "render_parameter",
    "render_statement",
]
