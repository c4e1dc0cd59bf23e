"""
Logging configuration.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import structlog
from structlog.stdlib import LoggerFactory

from .settings import get_settings


def setup_logging(
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
    log_format: Optional[str] = None,
) -> None:
    """
    logging for post-card.
    log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_file: Path to log file
    log_format: Log format ('json' or 'text')

    This function sets up:
    Structured logging through structlog
    **Console and optional rotating file handlers
    """
    settings = get_settings()

    # Use provided params or fall back to settings
    log_level = (log_level or settings.log_level).upper()
    log_file = log_file or settings.log_file
    log_format = log_format or settings.log_format

    # Create logs directory if it doesn't exist
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

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
            (
                structlog.processors.JSONRenderer()
                if log_format == "json"
                else structlog.dev.ConsoleRenderer()
            ),
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level))

    # Clear existing handlers
    root_logger.handlers.clear()

    # Cards go to stdout, so logs go to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    console_handler.setLevel(getattr(logging, log_level))
    root_logger.addHandler(console_handler)

    if log_file:
        root_logger.addHandler(create_rotating_file_handler(log_file))

    configure_third_party_loggers()

    logger = structlog.get_logger(__name__)
    logger.debug(
        "Logging configured",
        log_level=log_level,
        log_file=log_file,
        log_format=log_format,
    )


def create_rotating_file_handler(
    log_file: str, max_bytes: int = 10 * 1024 * 1024, backup_count: int = 5
) -> logging.handlers.RotatingFileHandler:
    """
    Create a rotating file handler for log files.
    log_file: Path to the log file
    max_bytes: Size at which the file is rotated
    backup_count: Number of backup files to keep

    Returns:  Configured rotating file handler
    """
    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.setLevel(logging.DEBUG)  # File handler captures all levels

    return handler


def configure_third_party_loggers() -> None:
    """Quiet the HTTP client libraries."""
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.
    name: Logger name (usually __name__)
    Returns: Configured structured logger
    """
    return structlog.get_logger(name)


def get_service_logger(service_name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger for a service module.
    service_name: Name of the service (e.g., 'MetadataExtractor')
    Returns: Configured structured logger
    """
    return structlog.get_logger(f"service.{service_name}")
