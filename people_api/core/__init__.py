"""
Core module - Configuration and cross-cutting concerns.

This module provides:
- config.py         : Environment-based configuration management
- logging_config.py : Centralized logging setup
- exceptions.py     : Error types and their HTTP mapping
- audit.py          : Request audit and security header middleware
"""
from people_api.core.config import get_settings, Settings
from people_api.core.logging_config import setup_logging, get_logger
from people_api.core.exceptions import (
    PeopleApiException,
    PersonNotFoundError,
    InvalidDataError,
)

__all__ = [
    "get_settings",
    "Settings",
    "setup_logging",
    "get_logger",
    "PeopleApiException",
    "PersonNotFoundError",
    "InvalidDataError",
]
