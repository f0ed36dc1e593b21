"""Tests for TracerOptions validation."""

from __future__ import annotations

from dataclasses import replace

import pytest

from sqlalchemy_query_tracer.exceptions import TracerConfigurationError
from sqlalchemy_query_tracer.options import TracerOptions
from sqlalchemy_query_tracer.sinks import print_sink


class TestTracerOptions:
    def test_defaults(self) -> None:
        options = TracerOptions()
        assert options.sink is print_sink
        assert options.placeholder == "?"
        assert options.colors is False
        assert options.precision == 3

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            TracerOptions().colors = True  # type: ignore[misc]

    @pytest.mark.parametrize("placeholder", ["", "??", 1])
    def test_invalid_placeholder(self, placeholder: object) -> None:
        with pytest.raises(TracerConfigurationError) as exc_info:
            TracerOptions(placeholder=placeholder)  # type: ignore[arg-type]
        assert exc_info.value.option == "placeholder"

    def test_sink_must_be_callable(self) -> None:
        with pytest.raises(TracerConfigurationError) as exc_info:
            TracerOptions(sink="stdout")  # type: ignore[arg-type]
        assert exc_info.value.option == "sink"

    @pytest.mark.parametrize("precision", [-1, 1.5, True])
    def test_invalid_precision(self, precision: object) -> None:
        with pytest.raises(TracerConfigurationError):
            TracerOptions(precision=precision)  # type: ignore[arg-type]

    def test_replace_revalidates(self) -> None:
        with pytest.raises(TracerConfigurationError):
            replace(TracerOptions(), placeholder="")
