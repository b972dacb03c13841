"""
API module - FastAPI routes and HTTP handling.

This module handles:
- Path matching and handler selection
- Request parsing and response formatting
- Error handling
- Route definitions
"""
from people_api.api.main import app, create_app

__all__ = ["app", "create_app"]
