"""
Person Service - Business logic for person records.

Routes stay thin: they hand the parsed request to this service and
return whatever it produces. Failures surface as PersonNotFoundError,
which the API layer maps to a 404 JSON payload.
"""
from typing import List, Optional

from fastapi import Depends

from people_api.core.exceptions import PersonNotFoundError
from people_api.core.logging_config import get_logger
from people_api.models.person import Person, PersonPayload
from people_api.store import PersonStore, get_person_store

logger = get_logger(__name__)


class PersonService:
    """
    Service for listing, reading, creating, updating and deleting people.

    Example:
        >>> service = PersonService(PersonStore())
        >>> ann = service.create_person(PersonPayload(name="Ann", age=30))
        >>> service.get_person(ann.id) == ann
        True
    """

    def __init__(self, store: Optional[PersonStore] = None):
        """
        Args:
            store: Optional PersonStore instance.
                   Uses global singleton if not provided.
        """
        self.store = store if store is not None else get_person_store()

    def list_people(self) -> List[Person]:
        """Return every person in store order."""
        people = self.store.list_people()
        logger.debug(f"Listing {len(people)} people")
        return people

    def get_person(self, person_id: str) -> Person:
        """
        Get one person.

        Raises:
            PersonNotFoundError: If no person has this id.
        """
        person = self.store.get(person_id)
        if person is None:
            logger.info(f"Person not found: {person_id}")
            raise PersonNotFoundError(person_id)
        return person

    def create_person(self, payload: PersonPayload) -> Person:
        """
        Store a new person. A client-supplied id is discarded.
        """
        if payload.id:
            logger.debug(f"Ignoring client-supplied id on create: {payload.id}")
        return self.store.create(payload.name, payload.age)

    def update_person(self, payload: PersonPayload) -> Person:
        """
        Overwrite name and age of the person identified by payload.id.

        Raises:
            PersonNotFoundError: If payload.id is missing or unknown.
        """
        person = self.store.update(payload.id, payload.name, payload.age)
        if person is None:
            logger.info(f"Cannot update, person not found: {payload.id}")
            raise PersonNotFoundError(payload.id)
        return person

    def delete_person(self, person_id: str) -> Person:
        """
        Remove a person and return the removed record.

        Raises:
            PersonNotFoundError: If no person has this id.
        """
        person = self.store.delete(person_id)
        if person is None:
            logger.info(f"Cannot delete, person not found: {person_id}")
            raise PersonNotFoundError(person_id)
        return person


def get_person_service(store: PersonStore = Depends(get_person_store)) -> PersonService:
    """FastAPI dependency wiring the service to the injected store."""
    return PersonService(store)
