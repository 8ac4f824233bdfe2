"""structlog configuration for applications embedding monthbounds.

The library itself only emits stdlib records; call ``configure_logging`` from
an application entrypoint to render them.

Two output modes:
- Human (default): console-rendered lines to stderr
- JSON (MONTHBOUNDS_LOG_JSON=1): structured JSON lines to stderr
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

from monthbounds.config import Settings, load_settings


def configure_logging(settings: Settings | None = None, *, stream: TextIO | None = None) -> None:
    """Configure structlog processors and route ``monthbounds`` records through them.

    Args:
        settings: Resolved settings; read from the environment when omitted.
        stream: Output stream, stderr by default.
    """
    settings = settings or load_settings()
    out = stream or sys.stderr

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=out.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(out)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger("monthbounds")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(settings.log_level)
    package_logger.propagate = False
