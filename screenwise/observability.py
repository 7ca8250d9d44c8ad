"""Structured logging setup shared by the CLI report and the screening service."""

import logging

import structlog

from screenwise.config import LoggingConfig, get_config


def configure_logging(config: LoggingConfig | None = None) -> None:
    """Configure structlog on top of the stdlib logger.

    JSON output for staging/production, a readable console renderer in
    development.
    """
    config = config or get_config().logging
    logging.basicConfig(format="%(message)s", level=getattr(logging, config.level))

    renderer: structlog.types.Processor = (
        structlog.dev.ConsoleRenderer()
        if config.format == "console"
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
