"""Structlog configuration for the debugfmt CLI.

Rendered values are written to stdout, so every log line goes to stderr (or
the stream passed in).
"""

from __future__ import annotations

import logging as std_logging
import sys
from typing import TextIO

import structlog


def _level_from_verbosity(verbosity: int) -> int:
    if verbosity <= 0:
        return std_logging.WARNING
    if verbosity == 1:
        return std_logging.INFO
    return std_logging.DEBUG


def _processors(json_mode: bool) -> list[structlog.typing.Processor]:
    renderer: structlog.typing.Processor = (
        structlog.processors.JSONRenderer() if json_mode else structlog.dev.ConsoleRenderer()
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(
    json_mode: bool = False,
    verbosity: int = 0,
    stream: TextIO | None = None,
) -> None:
    """Route stdlib registry logs and structlog CLI events to ``stream`` (stderr)."""

    target = stream if stream is not None else sys.stderr
    level = _level_from_verbosity(verbosity)

    handler = std_logging.StreamHandler(target)
    handler.setFormatter(std_logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    std_logging.basicConfig(level=level, handlers=[handler])

    structlog.configure(
        processors=_processors(json_mode),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=target),
        cache_logger_on_first_use=True,
    )
