"""
Centralized logging configuration.

Console output follows LOG_LEVEL; a per-day file named after APP_NAME
under LOG_DIR captures everything. Request lines come from
AuditMiddleware, so uvicorn's own access log is muted.
"""
import logging
import re
import sys
from datetime import date
from pathlib import Path
from typing import Optional

from people_api.core.config import Settings


# Module-level flag to prevent duplicate handler registration
_logging_configured = False

DEFAULT_LOG_DIR = Path(__file__).parent.parent.parent / "logs"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"

# Request lines are logged by AuditMiddleware
_QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def log_file_path(settings: Settings, day: Optional[date] = None) -> Path:
    """
    Path of the daily log file for this service.

    Example:
        APP_NAME=PeopleApi, LOG_DIR=/var/log/people on 2024-01-15
        -> /var/log/people/peopleapi_20240115.log
    """
    day = day or date.today()
    slug = re.sub(r"[^a-z0-9]+", "-", settings.app_name.lower()).strip("-") or "app"
    log_dir = settings.log_dir or DEFAULT_LOG_DIR
    return log_dir / f"{slug}_{day.strftime('%Y%m%d')}.log"


def setup_logging(settings: Settings) -> logging.Logger:
    """
    Configure application-wide logging from settings.

    Called once at import of the application module; later calls are no-ops
    so building several apps (as tests do) does not duplicate handlers.

    Args:
        settings: Supplies log_level, log_dir, app_name and app_env

    Returns:
        Configured root logger instance
    """
    global _logging_configured

    if _logging_configured:
        return logging.getLogger()

    log_file = log_file_path(settings)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setFormatter(formatter)
    file_handler.setLevel(logging.DEBUG)  # File captures everything

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _logging_configured = True

    root_logger.debug(
        f"Logging configured for {settings.app_name} ({settings.app_env}): "
        f"level={settings.log_level}, file={log_file}"
    )

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Logger name, typically __name__ of the calling module

    Returns:
        Logger instance for the specified name
    """
    return logging.getLogger(name)
