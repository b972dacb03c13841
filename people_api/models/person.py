"""
Request and Response models for the People API.

These Pydantic models define the contract between client and server.
They provide:
- Type validation
- Automatic documentation
- Request/response serialization
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, StrictInt, StrictStr


class Person(BaseModel):
    """
    A person record as stored and returned by the API.

    Attributes:
        id: Server-generated identifier (UUID, 8-4-4-4-12 hex groups).
        name: Display name.
        age: Age in years.
    """
    id: str = Field(
        ...,
        description="Server-assigned identifier",
        examples=["2e752824-1657-4c7f-844b-6ec2e168e99c"]
    )
    name: str = Field(..., description="Person's name", examples=["Tom"])
    age: int = Field(..., description="Person's age", examples=[37])


class PersonPayload(BaseModel):
    """
    Request body for create (POST) and update (PUT).

    On create, any id is ignored; on update, the id selects the record
    to overwrite. Missing name/age fall back to empty values.
    Field types are not coerced: "30" or true for age is invalid data.
    """
    id: Optional[StrictStr] = Field(
        default=None,
        description="Existing id (update only; ignored on create)"
    )
    name: StrictStr = Field(default="", description="Person's name")
    age: StrictInt = Field(default=0, description="Person's age")


class ErrorResponse(BaseModel):
    """Error payload returned for not-found and invalid-data failures."""
    message: str = Field(..., examples=["not found"])


class HealthResponse(BaseModel):
    """Response model for the /health endpoint."""
    status: str = Field(default="healthy")
    version: str
    record_count: int
    timestamp: datetime = Field(default_factory=datetime.utcnow)
