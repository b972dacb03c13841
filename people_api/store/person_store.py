"""
Person Store - In-memory record storage.

This module owns every Person record for the lifetime of the process:
- Insertion-ordered storage keyed by id
- Server-side id generation
- Copy-out reads so callers never alias stored records

Architecture note:
This is an in-memory implementation suitable for single-instance deployments.
Records are lost on restart.
"""
import threading
import uuid
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from people_api.core.logging_config import get_logger
from people_api.models.person import Person

logger = get_logger(__name__)

# Seeded into a fresh store when SEED_SAMPLE_DATA is enabled
SAMPLE_PEOPLE: Tuple[Tuple[str, int], ...] = (
    ("Tom", 37),
    ("Bob", 41),
    ("Sam", 24),
)


def generate_person_id() -> str:
    """Return a fresh id in canonical 8-4-4-4-12 form."""
    return str(uuid.uuid4())


class PersonStore:
    """
    Thread-safe ordered collection of Person records.

    Every read and every read-modify-write runs under one re-entrant lock,
    so concurrent create/update/delete requests cannot lose updates.

    Example:
        >>> store = PersonStore()
        >>> ann = store.create("Ann", 30)
        >>> store.get(ann.id).name
        'Ann'
        >>> store.update(ann.id, "Ann", 31).age
        31
        >>> store.delete(ann.id) is not None
        True
    """

    def __init__(self, id_factory: Callable[[], str] = generate_person_id):
        """
        Initialize an empty store.

        Args:
            id_factory: Callable producing new ids. Must return strings
                        in the 8-4-4-4-12 hex shape to be addressable.
        """
        self._id_factory = id_factory
        self._people: Dict[str, Person] = {}
        self._lock = threading.RLock()

    def list_people(self) -> List[Person]:
        """Return copies of all records in insertion order."""
        with self._lock:
            return [person.model_copy() for person in self._people.values()]

    def get(self, person_id: Optional[str]) -> Optional[Person]:
        """
        Look up a person by id.

        Args:
            person_id: The id to look up (None never matches)

        Returns:
            A copy of the record, or None if not found
        """
        if person_id is None:
            return None
        with self._lock:
            person = self._people.get(person_id)
            return person.model_copy() if person else None

    def create(self, name: str, age: int) -> Person:
        """
        Append a new record with a freshly generated id.

        Args:
            name: Person's name
            age: Person's age

        Returns:
            A copy of the stored record
        """
        with self._lock:
            person_id = self._id_factory()
            # A colliding id would overwrite an existing record
            while person_id in self._people:
                person_id = self._id_factory()

            person = Person(id=person_id, name=name, age=age)
            self._people[person_id] = person

            logger.info(f"Created person: {person_id}")
            return person.model_copy()

    def update(self, person_id: Optional[str], name: str, age: int) -> Optional[Person]:
        """
        Overwrite name and age of an existing record. The id never changes.

        Args:
            person_id: Id of the record to update
            name: New name
            age: New age

        Returns:
            A copy of the updated record, or None if not found
        """
        if person_id is None:
            return None
        with self._lock:
            person = self._people.get(person_id)
            if person is None:
                return None

            person.name = name
            person.age = age

            logger.info(f"Updated person: {person_id}")
            return person.model_copy()

    def delete(self, person_id: Optional[str]) -> Optional[Person]:
        """
        Remove a record.

        Args:
            person_id: Id of the record to remove

        Returns:
            The removed record, or None if not found
        """
        if person_id is None:
            return None
        with self._lock:
            person = self._people.pop(person_id, None)
            if person is not None:
                logger.info(f"Deleted person: {person_id}")
            return person

    def seed(self, people: Iterable[Tuple[str, int]] = SAMPLE_PEOPLE) -> List[Person]:
        """
        Create several records at once, in order.

        Returns:
            The created records
        """
        with self._lock:
            created = [self.create(name, age) for name, age in people]
        logger.info(f"Seeded store with {len(created)} people")
        return created

    def clear(self) -> None:
        """Remove all records."""
        with self._lock:
            self._people.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._people)

    def __contains__(self, person_id: object) -> bool:
        with self._lock:
            return person_id in self._people


# Singleton instance
_person_store: Optional[PersonStore] = None
_person_store_lock = threading.Lock()


def get_person_store() -> PersonStore:
    """
    Get or create the global PersonStore instance.

    Used as a FastAPI dependency; tests override it or call
    reset_person_store().

    Returns:
        The singleton PersonStore
    """
    global _person_store
    with _person_store_lock:
        if _person_store is None:
            _person_store = PersonStore()
            logger.info("PersonStore initialized")
        return _person_store


def reset_person_store() -> None:
    """Reset the global PersonStore (useful for testing)."""
    global _person_store
    with _person_store_lock:
        _person_store = None
