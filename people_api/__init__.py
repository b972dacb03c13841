"""
People API root package.

This package contains all application source code organized by responsibility:
- api/       : FastAPI app, routing and HTTP handling
- core/      : Configuration, logging, errors and middleware
- services/  : Business logic for person records
- store/     : In-memory person storage
- models/    : Pydantic models for request/response schemas
- static/    : HTML page served for unmatched requests
"""
__version__ = "0.1.0"
