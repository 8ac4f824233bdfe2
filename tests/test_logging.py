"""Tests for structlog-backed logging configuration."""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from monthbounds.config import Settings
from monthbounds.observability.logging import configure_logging
from monthbounds.tz.registry import clear_timezone_cache, resolve_timezone


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    package_logger = logging.getLogger("monthbounds")
    saved = (list(package_logger.handlers), package_logger.level, package_logger.propagate)
    clear_timezone_cache()
    yield
    package_logger.handlers[:] = saved[0]
    package_logger.setLevel(saved[1])
    package_logger.propagate = saved[2]
    structlog.reset_defaults()
    clear_timezone_cache()


def test_json_mode_renders_library_records() -> None:
    """Debug records from the registry come out as JSON lines."""
    stream = io.StringIO()
    configure_logging(Settings(log_level="DEBUG", log_json=True), stream=stream)

    resolve_timezone("Eastern Standard Time")

    events = [json.loads(line) for line in stream.getvalue().splitlines()]
    mapped = [event for event in events if "mapped windows timezone" in event["event"]]
    assert mapped
    assert mapped[0]["level"] == "debug"
    assert mapped[0]["logger"] == "monthbounds.tz.registry"


def test_warning_level_suppresses_debug() -> None:
    """The default level hides per-call debug output."""
    stream = io.StringIO()
    configure_logging(Settings(), stream=stream)

    resolve_timezone("Pacific Standard Time")

    assert stream.getvalue() == ""
