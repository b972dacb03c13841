"""
People Routes - CRUD endpoints over the person collection.

Mounted under the configured collection path (default /api/users):
- GET    ""             : List all people
- GET    "/{person_id}" : Get one person
- POST   ""             : Create a person (server assigns the id)
- PUT    ""             : Update name/age of the person in the body
- DELETE "/{person_id}" : Delete a person

Item routes only match identifier-shaped segments; other segments fall
through to the fallback page.
"""
from typing import List

from fastapi import APIRouter, Depends

from people_api.api.routing import ITEM_PATH
from people_api.models.person import ErrorResponse, Person, PersonPayload
from people_api.services import PersonService, get_person_service

router = APIRouter(tags=["People"])

NOT_FOUND = {404: {"model": ErrorResponse, "description": "No person with this id"}}
INVALID_DATA = {400: {"model": ErrorResponse, "description": "Body is missing or malformed"}}


@router.get(
    "",
    response_model=List[Person],
    summary="List people",
    description="Return every person, in the order they were created."
)
async def list_people(
    service: PersonService = Depends(get_person_service)
) -> List[Person]:
    return service.list_people()


@router.get(
    ITEM_PATH,
    response_model=Person,
    responses=NOT_FOUND,
    summary="Get person"
)
async def get_person(
    person_id: str,
    service: PersonService = Depends(get_person_service)
) -> Person:
    """Look up one person by id."""
    return service.get_person(person_id)


@router.post(
    "",
    response_model=Person,
    responses=INVALID_DATA,
    summary="Create person",
    description="""
    Store a new person and return it.

    Any `id` in the body is ignored; the server generates a fresh one.
    """
)
async def create_person(
    payload: PersonPayload,
    service: PersonService = Depends(get_person_service)
) -> Person:
    return service.create_person(payload)


@router.put(
    "",
    response_model=Person,
    responses={**NOT_FOUND, **INVALID_DATA},
    summary="Update person",
    description="""
    Overwrite `name` and `age` of the person whose `id` is in the body.

    The id itself never changes.
    """
)
async def update_person(
    payload: PersonPayload,
    service: PersonService = Depends(get_person_service)
) -> Person:
    return service.update_person(payload)


@router.delete(
    ITEM_PATH,
    response_model=Person,
    responses=NOT_FOUND,
    summary="Delete person"
)
async def delete_person(
    person_id: str,
    service: PersonService = Depends(get_person_service)
) -> Person:
    """Remove a person and return the removed record."""
    return service.delete_person(person_id)
