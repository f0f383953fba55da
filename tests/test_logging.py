"""Logging configuration keeps stdout clean."""

from __future__ import annotations

import io
import logging

import pytest
import structlog

from debugfmt.lib.logging import _level_from_verbosity, configure_logging


@pytest.mark.parametrize(
    ("verbosity", "level"),
    [(-1, logging.WARNING), (0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG)],
)
def test_level_from_verbosity(verbosity: int, level: int) -> None:
    assert _level_from_verbosity(verbosity) == level


def test_json_events_go_to_the_given_stream(capsys: pytest.CaptureFixture[str]) -> None:
    stream = io.StringIO()
    configure_logging(json_mode=True, verbosity=2, stream=stream)
    try:
        structlog.get_logger("debugfmt.test").debug("probe", answer=42)
    finally:
        structlog.reset_defaults()

    assert capsys.readouterr().out == ""
    assert '"event": "probe"' in stream.getvalue()
    assert '"answer": 42' in stream.getvalue()
    assert '"level": "debug"' in stream.getvalue()


def test_events_below_the_level_are_dropped() -> None:
    stream = io.StringIO()
    configure_logging(json_mode=True, verbosity=0, stream=stream)
    try:
        log = structlog.get_logger("debugfmt.test")
        log.info("hidden")
        log.warning("shown")
    finally:
        structlog.reset_defaults()

    assert "hidden" not in stream.getvalue()
    assert "shown" in stream.getvalue()
