"""Logging setup for fitshot.

Service and router modules keep using ``logging.getLogger(__name__)``; their
records are rendered by structlog so they share format and request context
with structured events from the server.
"""

import logging
import sys

import structlog

QUIET_LOGGERS = ("httpx", "httpcore", "aiosqlite", "uvicorn.access")


def setup_logging(log_level: str = "INFO", json_output: bool = False) -> None:
    """Route stdlib and structlog output through one stderr handler.

    Args:
        log_level: Root level name (DEBUG, INFO, WARNING, ERROR)
        json_output: JSON lines for log shipping; colored console otherwise
    """
    pre_chain = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def set_request_context(request_id: str) -> None:
    """Tag every log line of the current generation request with its id."""
    structlog.contextvars.bind_contextvars(request_id=request_id)


def clear_request_context() -> None:
    structlog.contextvars.unbind_contextvars("request_id")
