"""structlog setup for charcheck's log events.

charcheck emits a handful of structured events, all through
``structlog.get_logger(__name__)``:

- ``profanity_filter_disabled`` (WARNING/INFO, ``reason=``, ``path=``)
- ``profanity_filter_compiled`` / ``word_list_loaded`` (DEBUG, ``term_count=``)
- ``field_invalid`` (DEBUG, ``field=``, ``code=``; never the raw value)

Events are filtered by stdlib level before rendering, so per-field DEBUG
events cost nothing unless ``--verbose`` is set. Output goes to stderr
as console text or, with ``--log-json``, one JSON object per line.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

LOGGER_NAMESPACE = "charcheck"


def _renderer(log_json: bool, stream: TextIO) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=stream.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Route charcheck events to *stream* (default: current ``sys.stderr``).

    Safe to call repeatedly: the root handler is replaced, never stacked.
    Records from other libraries pass through the same renderer at
    WARNING and above.
    """
    out = stream if stream is not None else sys.stderr

    stamp = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            *stamp,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(out)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=stamp,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json, out),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)
    logging.getLogger(LOGGER_NAMESPACE).setLevel(logging.DEBUG if verbose else logging.WARNING)
