"""
Structured logging setup.
"""

import logging
import sys

import structlog

from src.config.settings import Settings, get_settings

# Azure SDK and HTTP internals log every request at DEBUG
QUIET_LOGGERS = ("azure", "urllib3")


def get_log_level(level: str) -> int:
    """Get the numeric level for a level name like "info"."""
    log_level = logging.getLevelNamesMapping().get(level.upper())
    if log_level is None:
        raise ValueError(f"Unknown log level: {level}")
    return log_level


def configure_logging(*, level: str = "INFO", json_output: bool = True) -> None:
    """
    Configure structlog and stdlib logging to write to stderr.

    Stdlib records (the Azure SDK logs through logging) are rendered
    the same way as structlog events.
    """
    log_level = get_log_level(level)
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    pre_chain = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.format_exc_info,
                renderer,
            ],
            foreign_pre_chain=pre_chain,
        )
    )
    logging.basicConfig(handlers=[handler], level=log_level, force=True)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))


def configure_from_settings(settings: Settings | None = None) -> None:
    """Apply the log level and format from application settings."""
    settings = settings or get_settings()
    configure_logging(level=settings.log_level, json_output=settings.log_format == "json")
