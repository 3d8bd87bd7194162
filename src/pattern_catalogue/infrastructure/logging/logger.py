"""Structured logging built on structlog and the standard logging module.

Demo output owns stdout, so every handler configured here writes to
stderr or to a file.
"""
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, List, Optional

import structlog

if TYPE_CHECKING:
    from pattern_catalogue.config.schemas.logging_schema import LoggingConfig

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"

# Set on every handler setup_logging installs
HANDLER_MARKER = "_pattern_catalogue_handler"


class DetailedFormatter(logging.Formatter):
    """Formatter that adds caller information to each record."""

    def format(self, record):
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def _configure_structlog() -> None:
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
            structlog.processors.KeyValueRenderer(key_order=["event"], drop_missing=True),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def setup_logging(config: Optional["LoggingConfig"] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        config: Logging section of the application configuration.
               If None, the configuration is loaded from defaults,
               the optional config file and environment variables.
    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        from pattern_catalogue.config import ConfigurationManager

        config = ConfigurationManager().get_app_config().logging

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level.upper()))

    handlers: List[logging.Handler] = []

    if config.destination in ("file", "both"):
        log_path = os.path.expandvars(config.file.path)
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.file.max_size_mb * 1024 * 1024,
            backupCount=config.file.backup_count,
        )
        file_handler.setFormatter(DetailedFormatter(LOG_FORMAT))
        handlers.append(file_handler)

    if config.destination in ("stderr", "both"):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(DetailedFormatter(LOG_FORMAT))
        handlers.append(console_handler)

    # Replace whatever a previous setup installed
    for handler in root_logger.handlers[:]:
        if getattr(handler, HANDLER_MARKER, False):
            root_logger.removeHandler(handler)
            handler.close()

    for handler in handlers:
        setattr(handler, HANDLER_MARKER, True)
        root_logger.addHandler(handler)

    _configure_structlog()

    logger = get_logger("pattern_catalogue")
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_destination=config.destination,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to the given name."""
    return structlog.get_logger(name)


# Route structlog through the standard library from the first import so
# nothing is rendered to stdout before setup_logging runs.
_configure_structlog()
