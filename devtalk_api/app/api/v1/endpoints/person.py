"""
Person endpoints for API v1.

These routes expose the Person resource the way a REST API should:
the URL names the entity (``/api/v1/person/{id}``), the HTTP method
picks the CRUD operation and the status code reports the outcome.

=========  =====================  =========  =====================
Method     Path                   Operation  Status
=========  =====================  =========  =====================
GET        ``/person``            list       200
GET        ``/person/{id}``       read       200, 404
PUT        ``/person/{id}``       create     201 + ``Location``
PATCH      ``/person/{id}``       replace    200, 404
DELETE     ``/person/{id}``       delete     204, 404
POST       ``/person``            upsert     200
=========  =====================  =========  =====================
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from devtalk_api.app.core.config import settings
from devtalk_api.app.schemas.person import Person
from devtalk_api.app.services.person_service import (
    PersonNotFound,
    PersonService,
    get_person_service,
)

router = APIRouter()


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Person not found")


@router.get("", response_model=List[Person])
@router.get("/", response_model=List[Person], include_in_schema=False)
def list_people(
    skip: int = Query(0, description="Number of records to skip; negative values count as 0"),
    take: Optional[int] = Query(None, description="Maximum number of records to return"),
    service: PersonService = Depends(get_person_service),
) -> List[Person]:
    """Return a page of people in store order."""
    if take is None:
        take = settings.default_page_size
    return service.list_people(skip=skip, take=take)


@router.get("/{person_id}", response_model=Person)
def get_person(person_id: int, service: PersonService = Depends(get_person_service)) -> Person:
    """Retrieve a single person by ID.

    Returns HTTP 404 if the person is not found.
    """
    try:
        return service.get_person(person_id)
    except PersonNotFound:
        raise _not_found()


@router.put("/{person_id}", response_model=Person, status_code=status.HTTP_201_CREATED)
def put_person(
    person_id: int,
    person_in: Person,
    response: Response,
    service: PersonService = Depends(get_person_service),
) -> Person:
    """Store a person under the given ID.

    The ID in the URL overrides any ID in the request body.  The
    response carries a ``Location`` header pointing at the resource.
    """
    person = service.put_person(person_id, person_in)
    response.headers["Location"] = f"/api/v1/person/{person_id}"
    return person


@router.patch("/{person_id}", response_model=Person)
def patch_person(
    person_id: int,
    person_in: Person,
    service: PersonService = Depends(get_person_service),
) -> Person:
    """Replace an existing person.

    This is a full replace, not a field‑level merge: fields missing
    from the body are reset to their defaults.  Patching a person that
    does not exist fails with 404.
    """
    try:
        return service.patch_person(person_id, person_in)
    except PersonNotFound:
        raise _not_found()


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_person(person_id: int, service: PersonService = Depends(get_person_service)) -> None:
    """Delete a person.

    Attempts to delete a non‑existent person fail with 404.
    """
    try:
        service.delete_person(person_id)
    except PersonNotFound:
        raise _not_found()
    return None


@router.post("", response_model=Person)
@router.post("/", response_model=Person, include_in_schema=False)
def post_person(person_in: Person, service: PersonService = Depends(get_person_service)) -> Person:
    """Create or update a person.

    If ``Id`` is unset or refers to no stored person a new record is
    created with the next free ID; otherwise the existing record is
    replaced.
    """
    return service.post_person(person_in)
