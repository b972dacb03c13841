"""
Store Package - In-memory person records.

Use `get_person_store()` to get the process-wide store.

Example:
    >>> from people_api.store import get_person_store
    >>> store = get_person_store()
    >>> person = store.create("Ann", 30)
"""
from people_api.store.person_store import (
    PersonStore,
    SAMPLE_PEOPLE,
    generate_person_id,
    get_person_store,
    reset_person_store,
)

__all__ = [
    "PersonStore",
    "SAMPLE_PEOPLE",
    "generate_person_id",
    "get_person_store",
    # Reset function (for testing)
    "reset_person_store",
]
