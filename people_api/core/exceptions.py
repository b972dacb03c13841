"""
Custom Exceptions - Application-specific error classes.

Each exception carries the HTTP status code it maps to and renders
itself as the JSON error payload the API returns: an object with a
human-readable "message" field.
"""
from typing import Optional


class PeopleApiException(Exception):
    """
    Base exception for all People API errors.

    Subclass this for specific error types.
    """
    status_code: int = 500
    error_code: str = "internal_error"

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        """Convert to error response dict."""
        return {"message": self.message}


class PersonNotFoundError(PeopleApiException):
    """Raised when no person has the requested id."""
    status_code = 404
    error_code = "not_found"

    def __init__(self, person_id: Optional[str] = None):
        super().__init__(
            message="not found",
            details=f"person_id={person_id}" if person_id else None
        )
        self.person_id = person_id


class InvalidDataError(PeopleApiException):
    """Raised when a request body is missing or does not parse into a person."""
    status_code = 400
    error_code = "invalid_data"

    def __init__(self, details: Optional[str] = None):
        super().__init__(message="invalid data", details=details)
