"""
Routing trace lines through the logging module.

Demonstrates:
- logger_sink() with a custom logger and level
- A placeholder other than "?" on a hand-driven QueryEventEmitter
"""

import logging

from sqlalchemy_query_tracer import (
    QueryCompleted,
    QueryEventEmitter,
    QueryStarted,
    attach,
    logger_sink,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(message)s")

emitter = attach(
    QueryEventEmitter(),
    sink=logger_sink(logging.getLogger("app.sql"), level=logging.INFO),
    placeholder="$",
)

emitter.emit("started", QueryStarted("q1", "UPDATE users SET tags = $ WHERE id = $", (["a", "b"], 7)))
emitter.emit("completed", QueryCompleted("q1"))
# app.sql SQL (0.012 ms) UPDATE users SET tags = ["a","b"] WHERE id = 7
