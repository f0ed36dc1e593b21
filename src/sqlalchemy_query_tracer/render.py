"""Statement rendering: inline bound parameters and format the duration label.

Substitution is a plain split on the placeholder character. A placeholder
that appears inside a quoted SQL literal is replaced like any other; no
attempt is made to parse the statement.
"""

from __future__ import annotations

import datetime
import json
import uuid
from collections.abc import Mapping, Sequence
from typing import Any

from colorlog.escape_codes import escape_codes

from sqlalchemy_query_tracer._types import ParamValue

DEFAULT_PLACEHOLDER = "?"
LABEL_COLOR = "purple"
STATEMENT_COLOR = "cyan"


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, (set, frozenset)):
        return list(value)
    raise TypeError(f"{type(value).__name__} is not JSON serializable")


def render_parameter(value: ParamValue | Any) -> str:
    """JSON-encode a bound value; fall back to its str() form."""
    try:
        return json.dumps(
            value,
            default=_json_default,
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        )
    except (TypeError, ValueError, RecursionError):
        pass
    try:
        return str(value)
    except Exception:
        return f"<unrenderable {type(value).__name__}>"


def positional_parameters(parameters: Any) -> Sequence[Any]:
    """Normalise a driver parameter payload to an ordered sequence."""
    if parameters is None:
        return ()
    if isinstance(parameters, Mapping):
        return tuple(parameters.values())
    if isinstance(parameters, (str, bytes)):
        return (parameters,)
    if isinstance(parameters, Sequence):
        return parameters
    return (parameters,)


def render_statement(
    statement: str,
    parameters: Sequence[ParamValue],
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> str:
    """Replace each placeholder with the JSON form of its positional parameter.

    Parameters beyond the placeholder count are dropped and placeholders
    beyond the parameter count render as the empty string.
    """
    parts = statement.split(placeholder)
    rendered = [parts[0]]
    for index, part in enumerate(parts[1:]):
        if index < len(parameters):
            rendered.append(render_parameter(parameters[index]))
        rendered.append(part)
    return "".join(rendered)


def format_label(duration_ms: float, precision: int = 3) -> str:
    return f"SQL ({duration_ms:.{precision}f} ms)"


def paint(text: str, color: str) -> str:
    """Wrap text in ANSI colour codes."""
    return f"{escape_codes[color]}{text}{escape_codes['reset']}"
