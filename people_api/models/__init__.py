"""
Models module - Pydantic schemas for data validation.

This module defines:
- Person: the stored and returned record
- PersonPayload: request body for create/update
- ErrorResponse / HealthResponse: auxiliary response shapes
"""
from people_api.models.person import (
    Person,
    PersonPayload,
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    "Person",
    "PersonPayload",
    "ErrorResponse",
    "HealthResponse",
]
