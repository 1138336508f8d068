"""
In‑memory storage for Person records.

There is no database behind this API: records live in a dictionary
keyed by id for as long as the process runs, and every new store
starts from the same three seed records.  Keying by id means a store
can never hold two people with the same identifier.

A ``PersonStore`` is created by ``create_app`` and attached to
``app.state``; route handlers receive it through the
``get_person_store`` dependency.  All access goes through a re‑entrant
lock so concurrent requests handled in FastAPI's threadpool cannot
interleave partial updates.  Use ``locked()`` when several calls must
happen atomically (look up, then mutate).
"""

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from fastapi import Request

from ..schemas.person import Person


SEED_PEOPLE: List[Dict[str, object]] = [
    {"id": 1, "first_name": "John", "last_name": "Smith", "age": 34},
    {"id": 2, "first_name": "Jane", "last_name": "Doe", "age": 23},
    {"id": 3, "first_name": "Bob", "last_name": "Robertson"},
]


class PersonStore:
    """Insertion‑ordered, lock‑guarded map of person id to record."""

    def __init__(self, people: Optional[List[Person]] = None) -> None:
        self._lock = threading.RLock()
        self._records: Dict[int, Person] = {}
        for person in people or []:
            self.add(person)

    @classmethod
    def seeded(cls) -> "PersonStore":
        """Return a store populated with the seed records."""
        return cls([Person(**data) for data in SEED_PEOPLE])

    @contextmanager
    def locked(self) -> Iterator["PersonStore"]:
        """Hold the store lock for the duration of the ``with`` block."""
        with self._lock:
            yield self

    def all(self) -> List[Person]:
        """Return copies of all records in store order."""
        with self._lock:
            return [person.model_copy() for person in self._records.values()]

    def find(self, person_id: int) -> Optional[Person]:
        with self._lock:
            person = self._records.get(person_id)
            return person.model_copy() if person is not None else None

    def add(self, person: Person) -> Person:
        """Store ``person``, replacing any record with the same id.

        A replaced record moves to the end of the store order.
        """
        with self._lock:
            self._records.pop(person.id, None)
            self._records[person.id] = person.model_copy()
            return person

    def remove(self, person_id: int) -> bool:
        """Remove the record with ``person_id``; return whether it existed."""
        with self._lock:
            return self._records.pop(person_id, None) is not None

    def max_id(self) -> int:
        """Return the highest stored id, or ``0`` for an empty store."""
        with self._lock:
            return max(self._records, default=0)

    def reset(self) -> None:
        """Drop every record and restore the seed data."""
        with self._lock:
            self._records.clear()
            for data in SEED_PEOPLE:
                self.add(Person(**data))

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, person_id: object) -> bool:
        with self._lock:
            return person_id in self._records


def get_person_store(request: Request) -> PersonStore:
    """FastAPI dependency returning the store owned by the running app."""
    return request.app.state.person_store
