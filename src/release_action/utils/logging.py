"""
Logging for the release action.

One readable line per decision and per external command, written to stderr.
A failed command is logged with the stderr it produced, so the CI job log
shows why git, yarn or npm gave up.
LOG_JSON switches the same events to JSON lines for log collectors.
"""
import logging
import sys

import structlog


def setup_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """
    Route structlog events and stdlib records (GitPython logs through
    logging) to a single stderr handler.

    Called once with defaults so configuration errors are reported, then
    again with LOG_LEVEL and LOG_JSON once settings are loaded.

    Args:
        level: Level name accepted by Settings.log_level
        json_logs: Emit JSON lines instead of key=value console lines
    """
    # Applied to both structlog events and foreign stdlib records
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    # CI logs are plain text, so no colors
    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=shared_processors,
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)
    root_logger.setLevel(getattr(logging, level))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Logger for one action module; events are snake_case names with key/value context."""
    return structlog.get_logger(name)
