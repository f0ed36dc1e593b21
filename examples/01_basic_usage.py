"""
Basic usage example of sqlalchemy-query-tracer.

Demonstrates:
- Attaching a tracer to an SQLAlchemy engine
- One timed line per completed statement, with parameters inlined
- Failed statements producing no line
"""

from sqlalchemy import create_engine, text
from sqlalchemy.exc import OperationalError

from sqlalchemy_query_tracer import attach

# attach() returns the engine, so it can wrap create_engine directly
engine = attach(create_engine("sqlite://"), colors=True)


with engine.connect() as conn:
    conn.exec_driver_sql("CREATE TABLE tickets (id INTEGER, title TEXT)")
    conn.execute(
        text("INSERT INTO tickets (id, title) VALUES (:id, :title)"),
        {"id": 1, "title": "Broken login"},
    )
    conn.execute(text("SELECT * FROM tickets WHERE id = :id"), {"id": 1}).all()

    try:
        conn.exec_driver_sql("SELECT * FROM missing")
    except OperationalError:
        pass  # not traced
