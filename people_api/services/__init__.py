"""
Services module - Business logic and orchestration.

Services contain the core application logic:
- No HTTP concerns (those belong in api/)
- No storage details (those belong in store/)
"""
from people_api.services.person_service import PersonService, get_person_service

__all__ = [
    "PersonService",
    "get_person_service",
]
