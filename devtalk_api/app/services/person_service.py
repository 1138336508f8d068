"""
Service layer for the Person resource.

This module implements the CRUD operations behind the ``/person``
endpoints.  A few implementation choices are worth pointing out
because they are exactly the decisions every REST API has to make:

* The id in the URL always wins over an id in the request body.
* Deleting or patching a record that does not exist is an error
  (``PersonNotFound``) rather than a silent no‑op.
* Patch replaces the whole record.  Merging individual fields is left
  out on purpose; it is surprisingly tricky to get right.
* Post is an upsert: an id that refers to an existing record updates
  it, anything else creates a new record with the next free id.

The service is a plain synchronous object built per request around
the app's ``PersonStore``: the store guards itself with a thread lock,
so route handlers are ``def`` functions run in FastAPI's threadpool.
"""

import logging
from typing import List

from fastapi import Depends

from devtalk_api.app.core.store import PersonStore, get_person_store
from devtalk_api.app.schemas.person import Person


logger = logging.getLogger(__name__)


class PersonNotFound(LookupError):
    """Raised when an operation targets an id that is not in the store."""

    def __init__(self, person_id: int) -> None:
        super().__init__(f"Person {person_id} not found")
        self.person_id = person_id


class PersonService:
    """CRUD operations over a :class:`PersonStore`."""

    def __init__(self, store: PersonStore) -> None:
        self.store = store

    def list_people(self, skip: int = 0, take: int = 50) -> List[Person]:
        """Return at most ``take`` records starting at offset ``skip``.

        A negative ``skip`` is treated as ``0``; a negative ``take``
        yields an empty list.
        """
        skip = max(0, skip)
        take = max(0, take)
        return self.store.all()[skip:skip + take]

    def get_person(self, person_id: int) -> Person:
        person = self.store.find(person_id)
        if person is None:
            logger.debug("Person %s not found", person_id)
            raise PersonNotFound(person_id)
        return person

    def put_person(self, person_id: int, data: Person) -> Person:
        """Store ``data`` under ``person_id`` and return it.

        Always succeeds.  An existing record with the same id is
        replaced.
        """
        record = data.model_copy(update={"id": person_id})
        with self.store.locked():
            replaced = person_id in self.store
            self.store.add(record)
        logger.info("%s person %s via PUT", "Replaced" if replaced else "Created", person_id)
        return record

    def delete_person(self, person_id: int) -> None:
        if not self.store.remove(person_id):
            logger.debug("Cannot delete person %s: not found", person_id)
            raise PersonNotFound(person_id)
        logger.info("Deleted person %s", person_id)

    def patch_person(self, person_id: int, data: Person) -> Person:
        """Replace the record ``person_id`` with ``data``.

        Raises ``PersonNotFound`` and leaves the store untouched when
        there is nothing to replace.
        """
        record = data.model_copy(update={"id": person_id})
        with self.store.locked():
            if person_id not in self.store:
                logger.debug("Cannot patch person %s: not found", person_id)
                raise PersonNotFound(person_id)
            self.store.remove(person_id)
            self.store.add(record)
        logger.info("Replaced person %s via PATCH", person_id)
        return record

    def post_person(self, data: Person) -> Person:
        """Create a new record or update an existing one.

        A positive id that is already stored updates that record;
        otherwise the record is created with ``max id + 1``.
        """
        with self.store.locked():
            if data.id > 0 and data.id in self.store:
                record = data.model_copy()
                self.store.add(record)
                logger.info("Updated person %s via POST", record.id)
                return record
            record = data.model_copy(update={"id": self.store.max_id() + 1})
            self.store.add(record)
        logger.info("Created person %s via POST", record.id)
        return record


def get_person_service(store: PersonStore = Depends(get_person_store)) -> PersonService:
    """FastAPI dependency building a service around the app's store."""
    return PersonService(store)
