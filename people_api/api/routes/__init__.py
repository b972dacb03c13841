"""
API Routes module - Endpoint definitions.

- people.py   : CRUD endpoints under the collection path
- health.py   : Health check endpoint
- fallback.py : Static page for everything else (register last)
"""
from people_api.api.routes.people import router as people_router
from people_api.api.routes.health import router as health_router
from people_api.api.routes.fallback import router as fallback_router

__all__ = [
    "people_router",
    "health_router",
    "fallback_router",
]
