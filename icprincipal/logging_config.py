"""
Structured logging configuration for icprincipal.

Provides JSON-formatted logs with a principal field for correlating key
handling and CLI runs.

Environment Variables:
    ICPRINCIPAL_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    ICPRINCIPAL_LOG_FORMAT: Log format (json, text) - default: json

Usage:
    from icprincipal.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, principal="2vxsx-fae")
    logger.info("Loaded identity")
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

LOG_LEVEL_ENV = "ICPRINCIPAL_LOG_LEVEL"
LOG_FORMAT_ENV = "ICPRINCIPAL_LOG_FORMAT"
HANDLER_NAME = "icprincipal"


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """
    Configure root logger with structured logging.

    Explicit arguments win over environment variables:
    - ICPRINCIPAL_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
    - ICPRINCIPAL_LOG_FORMAT: json, text (default: json)

    Logs go to stderr so CLI --json output on stdout stays parseable.
    """
    log_level = (level or os.getenv(LOG_LEVEL_ENV, "INFO")).upper()
    log_format = (fmt or os.getenv(LOG_FORMAT_ENV, "json")).lower()

    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    resolved = level_map.get(log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setLevel(resolved)
    handler.addFilter(PrincipalFilter())

    if log_format == "json":
        formatter: logging.Formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(principal)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [principal=%(principal)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str, principal: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger that tags records with a principal.

    Args:
        name: Logger name (typically __name__)
        principal: Principal text the records relate to

    Returns:
        LoggerAdapter with principal in extra fields
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"principal": principal or "N/A"})


class PrincipalFilter(logging.Filter):
    """
    Logging filter that adds a principal field to every record.

    Records emitted through plain loggers (not get_logger) still format.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "principal"):
            record.principal = "N/A"  # type: ignore
        return True
