"""structlog configuration for numkit.

Two output modes, both written to stderr:
- Human (default): ``ConsoleRenderer`` lines, colored on a TTY
- JSON (``log_json=True``): one object per line, tracebacks under ``exception``

numkit modules log through stdlib ``logging.getLogger(__name__)``; those
records and structlog's own events share one processor chain. The library
never calls this on import. Callers opt in via :func:`numkit.bootstrap`.
"""

from __future__ import annotations

import logging
import sys

import structlog

NUMKIT_LOGGER = "numkit"

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _render_processors(log_json: bool) -> list[structlog.types.Processor]:
    """Final processors for ProcessorFormatter; ConsoleRenderer formats exc_info itself."""
    if log_json:
        return [
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    return [
        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
        structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
    ]


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route structlog and stdlib records for ``numkit.*`` to stderr.

    Replaces any handlers on the root logger, so repeated calls never stack.

    Args:
        verbose: ``numkit`` loggers emit DEBUG. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_SHARED_PROCESSORS,
            processors=_render_processors(log_json),
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(NUMKIT_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
