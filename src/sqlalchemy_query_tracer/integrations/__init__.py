"""Bindings between database access layers and QueryHook listeners."""

from sqlalchemy_query_tracer.integrations.sqlalchemy import (
    instrument_engine,
    is_sqlalchemy_source,
)

__all__ = [
    "instrument_engine",
    "is_sqlalchemy_source",
]
