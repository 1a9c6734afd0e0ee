"""Centralized structured logging configuration using structlog.

Library modules obtain loggers with ``structlog.get_logger(__name__)`` and
emit snake_case events; nothing is rendered until an application calls
``configure_logging``. The CLI prints reports on stdout, so log events are
always written to stderr and a report can be piped or diffed while logging
at any level.

Example:
    >>> from graphwalk.log_config import configure_logging, get_logger
    >>> configure_logging(level="DEBUG", json_logs=False)
    >>> logger = get_logger(__name__)
    >>> logger.info("graph_loaded", vertex_count=4)
"""

import logging
import sys
from typing import Any

import structlog

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _renderer(json_logs: bool) -> Any:
    if json_logs:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=False,
        exception_formatter=structlog.dev.plain_traceback,
    )


def build_processors(json_logs: bool = False) -> list[Any]:
    """Processor chain shared by every graphwalk logger.

    Context variables are merged first so that values bound with
    ``bind_context`` (graph file, mode) can be overridden per event.
    """
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.MODULE,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _renderer(json_logs),
    ]


def configure_logging(level: str = "WARNING", json_logs: bool = False) -> None:
    """Route structlog events through stdlib logging to stderr.

    May be called more than once; each call replaces the previous handlers,
    which lets the CLI start at a default level and switch once the
    configuration file has been read.

    Args:
        level: One of ``LOG_LEVELS``, case-insensitive
        json_logs: Render one JSON object per line instead of key=value text

    Raises:
        ValueError: If an invalid log level is provided
    """
    name = level.upper()
    if name not in LOG_LEVELS:
        msg = f"Invalid log level: {level}"
        raise ValueError(msg)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, name),
        force=True,
    )

    structlog.configure(
        processors=build_processors(json_logs),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Module-level loggers must pick up reconfiguration
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        A structlog BoundLogger instance
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables to every subsequent log event.

    Example:
        >>> bind_context(graph_file="g.txt", mode="dfs")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    """Drop everything bound with ``bind_context``."""
    structlog.contextvars.clear_contextvars()
