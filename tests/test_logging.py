"""Tests for logging configuration."""

import io
import json

import pytest

from archlookup.registry import ProcessorRegistry
from archlookup.system import StaticArchitectureProvider
from archlookup.utils.logging import configure_logging, get_logger


@pytest.fixture
def log_stream():
    stream = io.StringIO()
    configure_logging(level="debug", format_type="json", stream=stream)
    yield stream
    configure_logging()


def test_json_events_carry_logger_name(log_stream: io.StringIO) -> None:
    get_logger("tests").info("something_happened", answer=42)

    event = json.loads(log_stream.getvalue().strip().splitlines()[-1])
    assert event["event"] == "something_happened"
    assert event["logger_name"] == "tests"
    assert event["answer"] == 42
    assert event["level"] == "info"
    assert "timestamp" in event


def test_registry_build_is_logged(log_stream: io.StringIO) -> None:
    ProcessorRegistry.build()

    events = [json.loads(line) for line in log_stream.getvalue().splitlines()]
    built = [e for e in events if e["event"] == "processor_registry_built"]
    assert built
    assert built[-1]["keys"] == 24
    assert built[-1]["processors"] == 6


def test_unknown_current_architecture_is_logged(log_stream: io.StringIO) -> None:
    registry = ProcessorRegistry.build(provider=StaticArchitectureProvider("sparc"))

    assert registry.lookup_current().is_err()

    events = [json.loads(line) for line in log_stream.getvalue().splitlines()]
    assert {"event": "current_architecture_unknown", "value": "sparc"}.items() <= events[-1].items()


def test_level_filters_debug(log_stream: io.StringIO) -> None:
    configure_logging(level="warn", stream=log_stream)

    get_logger("tests").debug("hidden")

    assert log_stream.getvalue() == ""
