"""Shared type aliases and protocols."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping, Sequence
from typing import Any, Union

# JSON-renderable bound parameter values
ParamValue = Union[
    str,
    int,
    float,
    bool,
    None,
    Sequence["ParamValue"],
    Mapping[str, "ParamValue"],
]

QueryId = Hashable

# sink(template, *args), printf-style like logging.Logger.info
Sink = Callable[..., None]

# Monotonic clock returning integer nanoseconds
Clock = Callable[[], int]

Handler = Callable[[Any], None]
