"""
Logging Configuration for BotSense

Every module logs through logging.getLogger(__name__); detection checks also
write one JSON line per evaluation to the audit logger (settings.AUDIT_LOGGER_NAME).
setup_logging() must run before the API or CLI starts evaluating snapshots.
"""

import logging
import sys
from typing import Literal

from botsense.config import settings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(log_level: str | None = None) -> None:
    """
    Install a single stdout handler on the root logger.

    Args:
        log_level: Optional override for log level. If not provided, uses settings.LOG_LEVEL

    """
    level = log_level or settings.LOG_LEVEL
    level_upper = level.upper()
    numeric_level = getattr(logging, level_upper, logging.INFO)

    root_logger = logging.getLogger()

    # Repeated calls (API import, CLI main) must not stack handlers
    root_logger.handlers.clear()
    root_logger.setLevel(numeric_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)
    root_logger.info(
        "Logging configured: level=%s, handler=console",
        level_upper,
    )

    _configure_audit_logger(numeric_level)
    _configure_third_party_loggers(numeric_level)


def _configure_audit_logger(app_level: int) -> None:
    """
    Audit records are written at INFO (WARNING when a detector failed).
    They follow the app level but never drop below INFO, so running the
    app at DEBUG does not change what the audit trail contains.
    """
    logging.getLogger(settings.AUDIT_LOGGER_NAME).setLevel(max(app_level, logging.INFO))


def _configure_third_party_loggers(app_level: int) -> None:
    """
    Pin the web server and HTTP client loggers to INFO or WARNING;
    a request per line at DEBUG drowns the detection logs.

    Args:
        app_level: The application's log level (used as reference)

    """
    logging.getLogger("uvicorn").setLevel(max(app_level, logging.INFO))
    logging.getLogger("uvicorn.access").setLevel(logging.INFO)
    logging.getLogger("uvicorn.error").setLevel(logging.WARNING)

    logging.getLogger("fastapi").setLevel(logging.INFO)
    logging.getLogger("starlette").setLevel(logging.WARNING)

    # TestClient and any outbound reporting go through httpx
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def update_log_level(log_level: str) -> None:
    """
    Change the root level at runtime, e.g. to debug a misbehaving detector
    without restarting the API.

    Args:
        log_level: New log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    level_upper = log_level.upper()
    numeric_level = getattr(logging, level_upper, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    for handler in root_logger.handlers:
        handler.setLevel(numeric_level)

    _configure_audit_logger(numeric_level)
    root_logger.info("Log level updated to: %s", level_upper)
