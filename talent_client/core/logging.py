"""
Structured logging configuration using structlog.

The client library never configures logging on import; applications and
scripts opt in by calling ``configure_logging`` once at startup.

In development (app_env=dev): colored console output.
Elsewhere: one JSON object per line with timestamp, level, logger name and
any bound context (for example the endpoint of a failed request).

Usage:
    from talent_client.core.logging import configure_logging
    configure_logging(app_env="dev")

    # The transport emits key-value events:
    #   api_request_failed endpoint=/applications/42/reject status_code=400
    # Plain stdlib loggers in the services are rendered the same way.
"""

import logging
import sys

import structlog

# Context added to every record, structlog and stdlib alike
SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
]

# Chatty third-party loggers, raised to WARNING outside dev
QUIET_LOGGERS = ("httpx", "httpcore")


def _renderer(app_env: str):
    if app_env == "dev":
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def configure_logging(app_env: str = "dev", level: int = logging.INFO) -> None:
    """
    Route structlog and stdlib loggers through one stderr handler.

    Args:
        app_env: "dev" for colored console lines, anything else for JSON
        level: Root log level
    """
    structlog.configure(
        processors=[*SHARED_PROCESSORS, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=_renderer(app_env),
            foreign_pre_chain=SHARED_PROCESSORS,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(level)

    if app_env != "dev":
        for name in QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
